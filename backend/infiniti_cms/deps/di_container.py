"""
Dependency injection container using dependency-injector.
Wires process-wide services and controllers that do not need a request session.
"""

from dependency_injector import containers, providers

from infiniti_cms.core.config import settings
from infiniti_cms.services.health_service import HealthService
from infiniti_cms.services.email_service import EmailService
from infiniti_cms.controllers.health_controller import HealthController


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Configuration
    config = providers.Configuration()

    # Services
    health_service = providers.Singleton(
        HealthService,
    )

    email_service = providers.Singleton(
        EmailService,
        host=config.smtp_host,
        port=config.smtp_port,
        user=config.smtp_user,
        password=config.smtp_password,
        use_tls=config.smtp_use_tls,
        from_name=config.smtp_from_name,
    )

    # Controllers
    health_controller = providers.Factory(
        HealthController,
        health_service=health_service,
    )


def _settings_config() -> dict:
    return {
        "smtp_host": settings.SMTP_HOST,
        "smtp_port": settings.SMTP_PORT,
        "smtp_user": settings.SMTP_USER,
        "smtp_password": settings.SMTP_PASSWORD,
        "smtp_use_tls": settings.SMTP_USE_TLS,
        "smtp_from_name": settings.SMTP_FROM_NAME,
    }


# Global container instance
_container: Container = None


def create_container() -> Container:
    container = Container()
    container.config.from_dict(_settings_config())
    return container


def get_container() -> Container:
    """Get the global dependency injection container."""
    global _container
    if _container is None:
        _container = create_container()
    return _container
