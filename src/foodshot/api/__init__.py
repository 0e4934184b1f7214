"""REST API for Food Photography Pro.

See :mod:`foodshot.api.main` for the endpoint list.
"""
