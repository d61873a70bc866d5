from dataclasses import dataclass

from src.catalog.core.services.database import DbSessionService


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
