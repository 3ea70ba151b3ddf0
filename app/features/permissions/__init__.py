"""
Permission management feature module.

Holds the static permission catalog, the dependency graph between
permissions and the grant/revoke closure rules applied to roles.
"""
