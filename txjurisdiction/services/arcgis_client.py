from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional
import httpx


@dataclass(frozen=True)
class ArcGISClient:
    user_agent: str
    timeout: float = 15.0
    transport: Optional[httpx.BaseTransport] = None

    def _headers(self) -> Dict[str, str]:
        return {"Accept": "application/json", "User-Agent": self.user_agent}

    def query_point(self, endpoint: str, latitude: float, longitude: float) -> Dict[str, Any]:
        """
        Point-in-polygon query against an ArcGIS REST layer:
        {endpoint}?f=json&geometry=<lon>,<lat>&spatialRel=esriSpatialRelWithin&...
        Returns the decoded JSON body. The body may carry an `error` member even on HTTP 200.
        """
        params = {
            "f": "json",
            "geometry": f"{longitude},{latitude}",
            "geometryType": "esriGeometryPoint",
            "inSR": "4326",
            "spatialRel": "esriSpatialRelWithin",
            "outFields": "*",
            "returnGeometry": "false",
            "where": "1=1",
        }

        with httpx.Client(timeout=self.timeout, transport=self.transport, headers=self._headers()) as client:
            r = client.get(endpoint, params=params)
            r.raise_for_status()
            data = r.json()
            # some MapServer layers answer with a bare list or null on bad input
            return data if isinstance(data, dict) else {}
