"""HTTP collaborators built on Starlette.

Modules:
    context: RequestContext handed to middleware, hooks and handlers
    starlette_router: RouterProtocol implementation
    body_parser: JSON body parser
    error_channel: Error channel logging through the structured logger
"""
