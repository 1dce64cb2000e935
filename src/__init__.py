"""
Source Code Root Module

This module serves as the root for the source code of the application.

Layer Structure:
- Domain: Core business logic and entities
- Application: Use cases and DTOs
- Infrastructure: External systems and services implementations
- Presentation: Controllers, routes and schemas for API REST
- Shared: Cross-cutting concerns and shared utilities
- Main: Composition root, application entry point and configuration
- Testing: Ephemeral in-process hosts of the application for tests
"""
