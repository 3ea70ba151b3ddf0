"""
Role management feature module.

Roles bundle permission ids; edits keep each role's set closed under the
permission dependency graph.
"""
