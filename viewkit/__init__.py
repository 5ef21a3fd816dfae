"""
viewkit
View building and exception rendering for Sanic applications
"""

__version__ = '0.1.0'
