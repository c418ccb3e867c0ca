# Table: notifications
# This file documents the expected database schema
# Actual operations are handled through the Store in service.py

"""
Expected table structure:

notifications:
- id: uuid (primary key)
- user_id: uuid (not null) - recipient
- event_id: uuid (foreign key to events.id, nullable)
- item_id: uuid (foreign key to items.id, nullable)
- type: text (not null) - see NotificationType
- title: text (not null)
- message: text (not null)
- read: boolean (default: false)
- created_at: timestamp (default: now())
"""
