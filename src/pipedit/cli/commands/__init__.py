"""pipedit CLI commands."""
