""" Staging and invocation of the external binutils programs """
