"""
Use Cases

Organized by domain:
- auth/: Registration, login, tokens, profile
- projects/: Project listing and editing
- admin/: Platform administration
"""
