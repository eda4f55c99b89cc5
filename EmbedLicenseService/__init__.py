"""
Embed License Service Django project.
"""
