"""
Web application package for the tic-tac-toe engine.

Provides a FastAPI-based REST API that parses a board from the query string
and returns the engine's move. Run with: uvicorn web.app:app
"""
