"""HTTP endpoint module for fsagent.

Provides the FastAPI application that serves the directory tree, single
file contents, and the stub terminal.
"""
