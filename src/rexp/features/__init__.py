"""Feature packages: metadata providers, themes, and display modules."""
