"""Budgetly: personal budgeting backend."""
