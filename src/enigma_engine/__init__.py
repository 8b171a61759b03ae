"""Rotor cipher machine simulator."""
