# SPDX-License-Identifier: Apache-2.0
"""
CV parsing MCP server.

Exposes the cvkit pipeline as Model Context Protocol tools over stdio:
- parse a CV file into normalized text plus basic identity fields
- validate a file before upload
- normalize text / extract basic info from text already in hand

See cvkit.mcp.server.create_app
"""
