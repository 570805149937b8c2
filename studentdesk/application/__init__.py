"""Application layer - use cases (commands, queries) and the dispatch engine.

Structure:
- cqrs/: message contracts, handler registry, pipelines, dispatcher
- decorators/: cross-cutting handler decorators (retry, audit log)
- commands/, queries/: student use cases and their handlers
- dtos/: query results
"""
