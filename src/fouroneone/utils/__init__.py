"""Small, stateless helpers shared across fouroneone.

Scope:
- Pure functions with standard-library dependencies only (mapping access,
  HTML escaping, CGI redirects, interactive prompting).
- No I/O beyond what the caller hands in (streams are parameters).
- One concern per module; import helpers from their defining modules.
"""
