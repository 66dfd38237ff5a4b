from sqlalchemy import URL

from ..config import SettingsManager


def get_connection_string(settings: SettingsManager | None = None) -> str:
    """Get PostgreSQL connection string with the configured schema."""

    database = (settings or SettingsManager.get_instance()).database
    if database.url:
        return database.url

    url = URL.create(
        database.driver,
        username=database.username,
        password=database.password or None,
        host=database.host,
        port=database.port,
        database=database.name,
        query={
            "options": f"-c search_path={database.schema}",
            "sslmode": database.sslmode,
        },
    )
    return url.render_as_string(hide_password=False)
