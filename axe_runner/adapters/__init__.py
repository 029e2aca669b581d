"""Host-side adapters that back the runner's interfaces."""
