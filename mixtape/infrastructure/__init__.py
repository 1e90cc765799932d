"""Infrastructure layer - file I/O, log sinks and the command line shell."""
