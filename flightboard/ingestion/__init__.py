"""
Data ingestion module for FlightBoard.

Handles HTTP communication with the AeroDataBox API.
"""

from flightboard.ingestion.aerodatabox_client import AeroDataBoxClient

__all__ = ['AeroDataBoxClient']
