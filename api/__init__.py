"""Vercel entry point for the storefront API."""
