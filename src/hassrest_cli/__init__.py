"""hassrest - a CLI utility that is not a core part of the library."""
