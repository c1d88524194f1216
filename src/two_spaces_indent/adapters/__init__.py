"""Host editor integrations."""
