"""Loyalty domain module (point balances)."""
