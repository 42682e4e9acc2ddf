""" Lets the test suite import the `example` directory from the project root. """
