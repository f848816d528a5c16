"""Core domain package for the Change-Id hook.

Core contains message parsing, footer recognition, id computation, and
footer insertion without any git or file-specific code, keeping the
business logic portable.
"""
