"""OnlyChurch backend package.

Feature modules (members, visitors, departments, groups, children, events,
dashboard, admin) sit on a shared reporting pipeline: `records` fetches
tenant-scoped rows and `stats` windows, counts and compares them.
"""
