"""
Callsign-based enrichment for live flights.

OpenSky state vectors carry no airline or route information. The first
three characters of an airline callsign are its ICAO operator code, which
is enough to name the airline and guess its home hub.

Usage:
    from flightpulse.ingestion.callsigns import resolve_airline

    resolve_airline('BAW123')  # 'British Airways'
"""

from types import MappingProxyType
from typing import Mapping, Optional

DEFAULT_HUB = 'LHR'

# ICAO operator code -> airline name
AIRLINES: Mapping[str, str] = MappingProxyType({
    'BAW': 'British Airways',
    'EZY': 'easyJet',
    'EZS': 'easyJet Switzerland',
    'VIR': 'Virgin Atlantic',
    'RYR': 'Ryanair',
    'RUK': 'Ryanair UK',
    'TOM': 'TUI Airways',
    'EXS': 'Jet2',
    'LOG': 'Loganair',
    'BEE': 'Flybe',
    'SHT': 'BA Shuttle',
    'UAE': 'Emirates',
    'QTR': 'Qatar Airways',
    'AFR': 'Air France',
    'KLM': 'KLM',
    'DLH': 'Lufthansa',
    'SWR': 'Swiss',
    'ACA': 'Air Canada',
    'AAL': 'American Airlines',
    'UAL': 'United Airlines',
    'DAL': 'Delta Air Lines',
    'THY': 'Turkish Airlines',
    'SAS': 'Scandinavian Airlines',
    'FIN': 'Finnair',
    'IBE': 'Iberia',
    'TAP': 'TAP Portugal',
    'AEE': 'Aegean Airlines',
})

# ICAO operator code -> IATA code of its main UK base
HUBS: Mapping[str, str] = MappingProxyType({
    'BAW': 'LHR',
    'EZY': 'LGW',
    'VIR': 'LHR',
    'RYR': 'STN',
    'TOM': 'LGW',
    'EXS': 'LBA',
    'LOG': 'EDI',
})


def _prefix(callsign: Optional[str]) -> str:
    return (callsign or '').strip()[:3].upper()


def resolve_airline(callsign: Optional[str]) -> str:
    """
    Airline name for a callsign.

    Unknown operators fall back to the first two characters of the
    callsign, and an empty callsign resolves to 'Unknown'.
    """
    callsign = (callsign or '').strip()
    if not callsign:
        return 'Unknown'
    return AIRLINES.get(_prefix(callsign), callsign[:2])


def resolve_origin_hub(callsign: Optional[str], default_hub: str = DEFAULT_HUB) -> str:
    """IATA code of the operator's hub, or default_hub when unknown."""
    return HUBS.get(_prefix(callsign), default_hub)
