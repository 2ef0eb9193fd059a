"""Dependency container wiring for the application."""

from dataclasses import dataclass, field

from supabase import create_client

from fitquest.adapters.in_memory_repositories import (
    InMemoryActivityRepository,
    InMemoryCharacterRepository,
    InMemoryNutritionLogRepository,
    InMemoryQuestRepository,
    InMemoryWorkoutLogRepository,
)
from fitquest.adapters.supabase_activity_repository import (
    SupabaseActivityRepository,
)
from fitquest.adapters.supabase_character_repository import (
    SupabaseCharacterRepository,
)
from fitquest.adapters.supabase_quest_repository import SupabaseQuestRepository
from fitquest.adapters.supabase_tracking_log_repository import (
    SupabaseNutritionLogRepository,
    SupabaseWorkoutLogRepository,
)
from fitquest.config import SUPABASE_BACKEND, Settings, parse_storage_backend
from fitquest.services.activities import ActivityLog, ActivityRepository
from fitquest.services.characters import CharacterLedger, CharacterRepository
from fitquest.services.progress import QuestProgressCoordinator
from fitquest.services.quests import QuestRegistry, QuestRepository
from fitquest.services.tracking import (
    NutritionLogRepository,
    TrackingService,
    WorkoutLogRepository,
)


@dataclass
class Repositories:
    """Storage adapters the services are built on."""

    characters: CharacterRepository = field(
        default_factory=InMemoryCharacterRepository
    )
    quests: QuestRepository = field(default_factory=InMemoryQuestRepository)
    activities: ActivityRepository = field(
        default_factory=InMemoryActivityRepository
    )
    nutrition_logs: NutritionLogRepository = field(
        default_factory=InMemoryNutritionLogRepository
    )
    workout_logs: WorkoutLogRepository = field(
        default_factory=InMemoryWorkoutLogRepository
    )


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    ledger: CharacterLedger
    quest_registry: QuestRegistry
    activity_log: ActivityLog
    coordinator: QuestProgressCoordinator
    tracking_service: TrackingService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    return build_services(resolved_settings, _build_repositories(resolved_settings))


def build_services(settings: Settings, repositories: Repositories) -> AppContainer:
    """Wire services on top of already-built repositories."""
    ledger = CharacterLedger(repositories.characters)
    quest_registry = QuestRegistry(repositories.quests)
    activity_log = ActivityLog(
        repositories.activities, timezone_name=settings.stats_timezone
    )
    coordinator = QuestProgressCoordinator(
        ledger=ledger,
        registry=quest_registry,
        activity_log=activity_log,
    )
    tracking_service = TrackingService(
        ledger=ledger,
        activity_log=activity_log,
        coordinator=coordinator,
        nutrition_repository=repositories.nutrition_logs,
        workout_repository=repositories.workout_logs,
        xp_per_glass=settings.hydration_xp_per_glass,
    )

    return AppContainer(
        settings=settings,
        ledger=ledger,
        quest_registry=quest_registry,
        activity_log=activity_log,
        coordinator=coordinator,
        tracking_service=tracking_service,
    )


def _build_repositories(settings: Settings) -> Repositories:
    if parse_storage_backend(settings.storage_backend) == SUPABASE_BACKEND:
        if not settings.supabase_url or not settings.supabase_service_key:
            raise ValueError("Supabase backend requires url and service key")
        client = create_client(settings.supabase_url, settings.supabase_service_key)
        return Repositories(
            characters=SupabaseCharacterRepository(client),
            quests=SupabaseQuestRepository(client),
            activities=SupabaseActivityRepository(client),
            nutrition_logs=SupabaseNutritionLogRepository(client),
            workout_logs=SupabaseWorkoutLogRepository(client),
        )
    return Repositories()
