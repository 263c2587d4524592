"""transpeak: translate text and hear it spoken."""
