"""
MCP tools for the cargo tools server.

This package contains MCP tool wrappers organized by functionality:
- service_tools: CoreService and Config operations
- string_tools: String utilities
- data_tools: Data point utilities
"""
