""" Command line utilities """
