"""Scripted HTTP session, controllable clock and raw payload builders."""

import json


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, payload=None, status_code=200, text=None, bad_json=False):
        self.payload = payload
        self.status_code = status_code
        self.text = text if text is not None else json.dumps(payload)
        self.bad_json = bad_json

    @property
    def ok(self):
        return 200 <= self.status_code < 300

    def json(self):
        if self.bad_json:
            raise ValueError('Expecting value')
        return self.payload


class FakeSession:
    """
    Scripted session: responses are routed by URL fragment and,
    optionally, by the 'q' query parameter.
    """

    def __init__(self):
        self.headers = {}
        self.calls = []
        self._routes = []

    def add(self, fragment, response, q=None):
        self._routes.append((fragment, q, response))
        return self

    def get(self, url, params=None, timeout=None):
        params = params or {}
        self.calls.append({'url': url, 'params': params, 'timeout': timeout})

        for fragment, q, response in self._routes:
            if fragment in url and (q is None or params.get('q') == q):
                if isinstance(response, Exception):
                    raise response
                return response
        return FakeResponse({'message': 'not found'}, status_code=404)


class FakeClock:
    def __init__(self, now=1_000_000.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


def make_raw_flight(
    number='AA 100',
    local_time='2024-05-01 14:30-04:00',
    status='Expected',
    airline='American Airlines',
    dest_iata='LHR',
    dest_name='London Heathrow',
    terminal='8',
    gate=None,
    model='Boeing 777-300ER',
):
    movement = {
        'airport': {'iata': dest_iata, 'icao': 'EGLL', 'name': dest_name},
        'scheduledTime': {'utc': '2024-05-01 18:30Z', 'local': local_time},
        'terminal': terminal,
    }
    if gate:
        movement['gate'] = gate
    return {
        'number': number,
        'status': status,
        'airline': {'name': airline},
        'aircraft': {'model': model},
        'movement': movement,
    }


def make_board(departures=None, arrivals=None):
    return FakeResponse({
        'departures': departures if departures is not None else [],
        'arrivals': arrivals if arrivals is not None else [],
    })


def make_airport(iata, lat, lon, name='Airport', city='City', country='US'):
    return {
        'iata': iata,
        'icao': 'K' + (iata or 'XXX'),
        'name': name,
        'shortName': name,
        'municipalityName': city,
        'countryCode': country,
        'location': {'lat': lat, 'lon': lon},
    }


def airport_search(*items):
    return FakeResponse({'searchBy': 'term', 'items': list(items)})


def board_url(code):
    return f'/flights/airports/iata/{code}/'
