"""Feature modules for cockpit-client."""
