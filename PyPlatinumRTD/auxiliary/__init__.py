"""Auxiliary calculators"""
