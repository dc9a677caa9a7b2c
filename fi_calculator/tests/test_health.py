from flask.testing import FlaskClient

from fi_calculator import __version__


def test_health_reports_ok(client: FlaskClient):
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json == {"status": "ok", "service": "fi-calculator", "version": __version__}


def test_modes_lists_all_three(client: FlaskClient):
    response = client.get("/api/modes")

    assert response.status_code == 200
    assert response.json["modes"] == ["goal-based", "time-based", "contribution-based"]


def test_wsgi_app_imports():
    from fi_calculator.wsgi import app

    assert app.name


def test_app_package_has_no_module_shadowing_stdlib_logging():
    import importlib.util
    import logging

    import fi_calculator.app

    assert importlib.util.find_spec("fi_calculator.app.logging") is None
    assert fi_calculator.app.logging is logging
