"""Telemetry export utilities for the launch simulator."""

import json
from pathlib import Path

import numpy as np

from rocketsim.simulation import FlightResult


class NumpyEncoder(json.JSONEncoder):
    """JSON encoder for NumPy scalars and arrays."""
    def default(self, obj):
        if isinstance(obj, np.integer):
            return int(obj)
        if isinstance(obj, np.floating):
            return float(obj)
        if isinstance(obj, np.ndarray):
            return obj.tolist()
        return super().default(obj)


def export_flight_to_json(result: FlightResult, filepath: str | Path) -> Path:
    """Export flight telemetry to a compact JSON file.

    Args:
        result: Recorded flight telemetry
        filepath: Path to save the JSON file

    Returns:
        Path the file was written to
    """
    final = result.final_state
    output = {
        "metadata": {
            "final_status": final.status.value,
            "final_stage": final.stage,
            "flight_time": final.time,
            "samples": len(result.states),
        },
        "telemetry": {
            "times": result.time,
            "stages": result.stage,
            "fuel": result.fuel,
            "altitudes": result.altitude,
            "speeds": result.speed,
            "statuses": [s.value for s in result.status],
        },
    }

    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w") as f:
        json.dump(output, f, cls=NumpyEncoder)

    return path
