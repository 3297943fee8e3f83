"""
MongoDB connection management shared by all module repositories.
"""
