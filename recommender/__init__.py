"""
recommender/__init__.py
-----------------------
Vectorizer and the four scoring strategies.
"""
