#!/usr/bin/env python3
"""
MCP tools for data point utilities.

Data points travel as {"id": int, "value": float, "label": str} objects.
"""

from typing import Any, Dict, List

from fastmcp import FastMCP, Context
from fastmcp.exceptions import ToolError

from cargo_tools import settings
from cargo_tools.core import load_data_points_impl
from cargo_tools.data import DataPoint, filter_by_threshold as filter_points, process_data_points as mean_value
from cargo_tools.logger import setup_logging

logger = setup_logging(settings.LOGS_DIR, settings.LOG_LEVEL)


def _decode(points: List[Dict[str, Any]]) -> List[DataPoint]:
    try:
        return [DataPoint.from_dict(p) for p in points]
    except ValueError as e:
        logger.warning("Rejected data points", extra={'extra_data': {'error': str(e)}})
        raise ToolError(str(e)) from e


def register_data_tools(mcp: FastMCP):
    """Register data point related MCP tools."""

    @mcp.tool
    async def process_data_points(points: List[Dict[str, Any]]) -> float:
        """
        Mean value of the given data points; 0.0 for an empty list.

        Args:
            points: Data points as {"id", "value", "label"} objects
        """
        return mean_value(_decode(points))

    @mcp.tool
    async def filter_by_threshold(points: List[Dict[str, Any]], threshold: float) -> List[Dict[str, Any]]:
        """
        Keep the data points whose value is at least threshold, in their original order.

        Args:
            points: Data points as {"id", "value", "label"} objects
            threshold: Inclusive lower bound
        """
        return [p.to_dict() for p in filter_points(_decode(points), threshold)]

    @mcp.tool
    async def load_data_points(file_path: str, ctx: Context) -> List[Dict[str, Any]]:
        """
        Read data points from a JSON array file.

        Args:
            file_path: Path to the JSON file

        Returns:
            The data points, or an empty list if the file could not be read
        """
        points = await load_data_points_impl(file_path, logger, ctx)
        return [p.to_dict() for p in points]
