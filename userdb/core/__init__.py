"""
Cross-cutting helpers shared across userdb.

Configuration (env vars) and logging live here; repositories, routers and
the CLI depend on these primitives instead of reading os.environ directly.
"""
