"""SpookyEyes: cartoon eyes that follow the viewer's nose."""
