"""Tests for the AeroDataBox HTTP client."""

from datetime import datetime, timezone

import pytest
import requests

from flightboard.errors import TransportError
from tests.fakes import FakeResponse, make_board, airport_search, make_airport, board_url


def test_sets_rapidapi_headers(client, session):
    assert session.headers['X-RapidAPI-Key'] == 'test-key'
    assert session.headers['X-RapidAPI-Host'] == 'aerodatabox.p.rapidapi.com'
    assert session.headers['Accept'] == 'application/json'


def test_board_request_uses_12_hour_window(client, session, usage):
    session.add(board_url('JFK'), make_board(departures=[]))
    now = datetime(2024, 5, 1, 22, 15, tzinfo=timezone.utc)

    client.get_board('JFK', window_hours=12, now=now)

    call = session.calls[0]
    assert call['url'] == (
        'https://aerodatabox.p.rapidapi.com/flights/airports/iata/JFK'
        '/2024-05-01T22:15/2024-05-02T10:15'
    )
    assert call['params']['withCancelled'] == 'true'
    assert call['params']['withCargo'] == 'false'
    assert call['timeout'] == 15
    assert usage.calls == 1


def test_non_2xx_raises_with_status_and_body(client, session, usage):
    session.add(board_url('JFK'), FakeResponse(status_code=503, text='upstream down'))

    with pytest.raises(TransportError) as exc_info:
        client.get_board('JFK')

    assert exc_info.value.status_code == 503
    assert exc_info.value.body == 'upstream down'
    assert 'API Error 503: upstream down' in str(exc_info.value)
    assert usage.calls == 1


def test_timeout_raises_transport_error_without_counting(client, session, usage):
    session.add(board_url('JFK'), requests.exceptions.Timeout('read timed out'))

    with pytest.raises(TransportError) as exc_info:
        client.get_board('JFK')

    assert 'timed out' in str(exc_info.value)
    assert usage.calls == 0


def test_connection_error_raises_transport_error(client, session):
    session.add(board_url('JFK'), requests.exceptions.ConnectionError('no route'))

    with pytest.raises(TransportError):
        client.get_board('JFK')


def test_invalid_json_raises_transport_error(client, session):
    session.add(board_url('JFK'), FakeResponse(text='<html>', bad_json=True))

    with pytest.raises(TransportError):
        client.get_board('JFK')


def test_payload_without_boards_is_transport_error(client, session):
    session.add(board_url('JFK'), FakeResponse({'message': 'hi'}))

    with pytest.raises(TransportError) as exc_info:
        client.get_board('JFK')

    assert 'No flight data' in str(exc_info.value)


def test_search_airports_passes_query_and_limit(client, session):
    session.add('/airports/search/term', airport_search(make_airport('LHR', 51.47, -0.45)))

    items = client.search_airports('heathrow', limit=20)

    assert items[0]['iata'] == 'LHR'
    assert session.calls[0]['params'] == {'q': 'heathrow', 'limit': 20}


def test_search_airports_without_items(client, session):
    session.add('/airports/search/term', FakeResponse({'searchBy': 'term'}))

    assert client.search_airports('nowhere') == []
