# mdoc macro introducing an option in a list, e.g. ".It Fl r Ar seconds"
OPTION_MARKER = ".It Fl"
