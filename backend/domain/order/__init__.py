"""Order domain module.

Read-only order data displayed on the profile page: per-user statistics
and a short list of recent orders. Orders are created and paid elsewhere.
"""
