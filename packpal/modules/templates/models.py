# Templates are a static catalogue (data.py), no table is required.
# Applying a template writes ordinary rows to categories and items.

"""
Template shape:
- name: text - unique within the catalogue, matched case-insensitively
- description: text
- categories: list of {name, description}
- items: list of {name, category, description?} - category is an index
  into categories
"""
