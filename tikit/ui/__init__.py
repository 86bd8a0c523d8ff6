"""Issue browsing: session state, filtering, projection and the TUI."""
