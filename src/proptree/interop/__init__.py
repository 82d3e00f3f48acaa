"""Bridges to other testing libraries.

``proptree.interop.hypothesis`` needs the optional ``hypothesis`` dependency
and is not imported here.
"""
