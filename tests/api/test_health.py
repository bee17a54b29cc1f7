# tests/api/test_health.py
import time

import pytest
from fastapi import status


class TestHealth:

    @pytest.mark.parametrize("path", ["/mshealth", "/movie-service/mshealth"])
    def test_health_check(self, client, path):
        before = int(time.time())
        response = client.get(path)

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["status"] == "healthy"
        assert body["version"] == "1.2.3"
        assert before <= body["timestamp"] <= int(time.time())

    def test_settings_are_attached_to_app(self, app, settings):
        assert app.state.settings is settings
        assert app.version == "1.2.3"
