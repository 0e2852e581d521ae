"""
pygame front end. Thin adapters only, no game rules here.
"""
