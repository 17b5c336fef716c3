"""
Adapters — thin Google API wrappers.

drive: folder lookup and child listings, exposed as walkable handles
docs: document creation and batchUpdate
services: cached authenticated API clients
"""
