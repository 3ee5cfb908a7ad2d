"""
UK airport reference table and lookups.

Covers the main UK airports plus the Crown Dependencies. The table is a
tuple of frozen Airport records built at import time.

Usage:
    from flightpulse.reference.airports import find_by_iata

    find_by_iata('lhr').icao  # 'EGLL'
"""

from typing import List, Optional, Tuple

from flightpulse.models import Airport

_TZ = 'Europe/London'
_UK = 'United Kingdom'
_MAIN = ('Main Terminal',)


UK_AIRPORTS: Tuple[Airport, ...] = (
    Airport('LHR', 'EGLL', 'London Heathrow Airport', 'London', _UK, 51.4700, -0.4543, 83, _TZ,
            ('Terminal 2', 'Terminal 3', 'Terminal 4', 'Terminal 5'),
            ('British Airways', 'Virgin Atlantic', 'American Airlines', 'United Airlines'),
            'international', 'large', 2, 80000000),
    Airport('LGW', 'EGKK', 'London Gatwick Airport', 'London', _UK, 51.1537, -0.1821, 202, _TZ,
            ('North Terminal', 'South Terminal'),
            ('easyJet', 'British Airways', 'Norwegian', 'WestJet'),
            'international', 'large', 2, 46000000),
    Airport('STN', 'EGSS', 'London Stansted Airport', 'London', _UK, 51.8860, 0.2389, 348, _TZ,
            _MAIN, ('Ryanair', 'Jet2', 'easyJet'),
            'international', 'large', 1, 28000000),
    Airport('LTN', 'EGGW', 'London Luton Airport', 'London', _UK, 51.8747, -0.3683, 526, _TZ,
            _MAIN, ('Wizz Air', 'easyJet', 'Ryanair', 'TUI'),
            'international', 'medium', 1, 18000000),
    Airport('LCY', 'EGLC', 'London City Airport', 'London', _UK, 51.5048, 0.0495, 19, _TZ,
            _MAIN, ('British Airways', 'KLM', 'Lufthansa'),
            'international', 'small', 1, 5000000),
    Airport('SEN', 'EGMC', 'London Southend Airport', 'London', _UK, 51.5714, 0.6956, 49, _TZ,
            _MAIN, ('Ryanair',),
            'international', 'small', 1, 2000000),
    Airport('MAN', 'EGCC', 'Manchester Airport', 'Manchester', _UK, 53.3537, -2.2750, 257, _TZ,
            ('Terminal 1', 'Terminal 2', 'Terminal 3'),
            ('Ryanair', 'easyJet', 'TUI', 'Jet2', 'Emirates'),
            'international', 'large', 2, 29000000),
    Airport('BHX', 'EGBB', 'Birmingham Airport', 'Birmingham', _UK, 52.4539, -1.7480, 327, _TZ,
            _MAIN, ('Ryanair', 'TUI', 'Jet2', 'Emirates'),
            'international', 'medium', 1, 12500000),
    Airport('EDI', 'EGPH', 'Edinburgh Airport', 'Edinburgh', _UK, 55.9508, -3.3615, 135, _TZ,
            _MAIN, ('Ryanair', 'easyJet', 'British Airways', 'Loganair'),
            'international', 'medium', 1, 14700000),
    Airport('GLA', 'EGPF', 'Glasgow Airport', 'Glasgow', _UK, 55.8719, -4.4331, 26, _TZ,
            _MAIN, ('easyJet', 'TUI', 'Jet2', 'Ryanair'),
            'international', 'medium', 1, 9700000),
    Airport('BRS', 'EGGD', 'Bristol Airport', 'Bristol', _UK, 51.3827, -2.7190, 622, _TZ,
            _MAIN, ('easyJet', 'TUI', 'Ryanair', 'Jet2'),
            'international', 'medium', 1, 9000000),
    Airport('LPL', 'EGGP', 'Liverpool John Lennon Airport', 'Liverpool', _UK, 53.3336, -2.8497, 80, _TZ,
            _MAIN, ('Ryanair', 'easyJet', 'Wizz Air'),
            'international', 'medium', 1, 5000000),
    Airport('NCL', 'EGNT', 'Newcastle Airport', 'Newcastle upon Tyne', _UK, 55.0375, -1.6917, 266, _TZ,
            _MAIN, ('easyJet', 'Ryanair', 'TUI', 'Jet2'),
            'international', 'medium', 1, 5400000),
    Airport('LBA', 'EGNM', 'Leeds Bradford Airport', 'Leeds', _UK, 53.8659, -1.6606, 681, _TZ,
            _MAIN, ('Jet2', 'Ryanair', 'Wizz Air'),
            'international', 'medium', 1, 4000000),
    Airport('EMA', 'EGNX', 'East Midlands Airport', 'Nottingham', _UK, 52.8311, -1.3281, 306, _TZ,
            _MAIN, ('Ryanair', 'TUI', 'Jet2'),
            'international', 'medium', 1, 4900000),
    Airport('BFS', 'EGAA', 'Belfast International Airport', 'Belfast', _UK, 54.6575, -6.2158, 268, _TZ,
            _MAIN, ('easyJet', 'Jet2', 'Ryanair', 'TUI'),
            'international', 'medium', 2, 6300000),
    Airport('BHD', 'EGAC', 'George Best Belfast City Airport', 'Belfast', _UK, 54.6181, -5.8725, 15, _TZ,
            _MAIN, ('British Airways', 'Aer Lingus', 'Loganair'),
            'regional', 'small', 1, 2500000),
    Airport('ABZ', 'EGPD', 'Aberdeen Airport', 'Aberdeen', _UK, 57.2019, -2.1978, 215, _TZ,
            _MAIN, ('British Airways', 'Loganair', 'easyJet', 'KLM'),
            'international', 'medium', 1, 3100000),
    Airport('CWL', 'EGFF', 'Cardiff Airport', 'Cardiff', _UK, 51.3967, -3.3433, 220, _TZ,
            _MAIN, ('TUI', 'Ryanair', 'Vueling'),
            'international', 'small', 1, 1600000),
    Airport('SOU', 'EGHI', 'Southampton Airport', 'Southampton', _UK, 50.9503, -1.3568, 44, _TZ,
            _MAIN, ('British Airways', 'Loganair', 'Aurigny'),
            'regional', 'small', 1, 2000000),
    Airport('EXT', 'EGTE', 'Exeter Airport', 'Exeter', _UK, 50.7344, -3.4139, 102, _TZ,
            _MAIN, ('Ryanair', 'TUI'),
            'regional', 'small', 1, 1000000),
    Airport('NWI', 'EGSH', 'Norwich Airport', 'Norwich', _UK, 52.6758, 1.2828, 117, _TZ,
            _MAIN, ('KLM', 'Loganair'),
            'regional', 'small', 1, 500000),
    Airport('INV', 'EGPE', 'Inverness Airport', 'Inverness', _UK, 57.5425, -4.0475, 31, _TZ,
            _MAIN, ('British Airways', 'easyJet', 'Loganair', 'KLM'),
            'regional', 'small', 1, 1000000),
    Airport('JER', 'EGJJ', 'Jersey Airport', 'St. Helier', 'Jersey', 49.2078, -2.1956, 277, _TZ,
            _MAIN, ('British Airways', 'easyJet', 'Blue Islands'),
            'regional', 'small', 1, 1700000),
    Airport('GCI', 'EGJB', 'Guernsey Airport', 'St. Peter Port', 'Guernsey', 49.4350, -2.6020, 336, _TZ,
            _MAIN, ('Aurigny', 'Blue Islands'),
            'regional', 'small', 1, 900000),
    Airport('IOM', 'EGNS', 'Isle of Man Airport', 'Douglas', 'Isle of Man', 54.0833, -4.6239, 52, _TZ,
            _MAIN, ('easyJet', 'Loganair', 'British Airways'),
            'regional', 'small', 1, 850000),
)


def find_by_iata(code: str) -> Optional[Airport]:
    """Exact IATA lookup, case-insensitive."""
    code = code.strip().upper()
    return next((a for a in UK_AIRPORTS if a.iata == code), None)


def find_by_icao(code: str) -> Optional[Airport]:
    """Exact ICAO lookup, case-insensitive."""
    code = code.strip().upper()
    return next((a for a in UK_AIRPORTS if a.icao == code), None)


def search_airports(query: Optional[str] = None) -> List[Airport]:
    """
    Airports whose name, city, IATA or ICAO code contains query.

    A blank query returns the full table in its original order.
    """
    query = (query or '').strip()
    if not query:
        return list(UK_AIRPORTS)
    return [a for a in UK_AIRPORTS if a.matches(query)]
