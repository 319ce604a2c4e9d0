"""Conformance tests for convert-to-3wa against the live what3words API."""

import pytest

from threewords.public_api import convert_to_three_word_address

pytestmark = pytest.mark.live


def test_three_word_address_from_coordinates(live_api_key, live_client):
    response = convert_to_three_word_address(
        live_api_key, "10.780549, 106.705245", api_client=live_client
    )

    assert response.status == 200
    assert response.data["words"] == "become.outlooks.rising"
