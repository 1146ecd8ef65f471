"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from calorie_tracker.adapters.supabase_auth_client import SupabaseAuthClient
from calorie_tracker.adapters.supabase_food_repository import SupabaseFoodRepository
from calorie_tracker.adapters.supabase_goals_repository import (
    SupabaseGoalsRepository,
)
from calorie_tracker.adapters.supabase_meal_repository import SupabaseMealRepository
from calorie_tracker.adapters.supabase_photo_repository import (
    SupabasePhotoRepository,
    SupabasePhotoStorage,
)
from calorie_tracker.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from calorie_tracker.adapters.supabase_weight_repository import (
    SupabaseWeightRepository,
)
from calorie_tracker.config import Settings
from calorie_tracker.services.cache import QueryCache
from calorie_tracker.services.daily_state import DailyStateService
from calorie_tracker.services.foods import FoodService
from calorie_tracker.services.goals import GoalsService
from calorie_tracker.services.meals import MealLogService
from calorie_tracker.services.photos import PhotoService
from calorie_tracker.services.progress import ProgressService
from calorie_tracker.services.sections import SectionService
from calorie_tracker.services.users import AuthService, UserService
from calorie_tracker.services.weights import WeightService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    auth_service: AuthService
    user_service: UserService
    daily_state_service: DailyStateService
    food_service: FoodService
    meal_log_service: MealLogService
    section_service: SectionService
    goals_service: GoalsService
    weight_service: WeightService
    photo_service: PhotoService
    progress_service: ProgressService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    cache = QueryCache()
    ttl = resolved_settings.cache_ttl_seconds
    default_goals = resolved_settings.default_goals()

    food_repository = SupabaseFoodRepository(supabase_client)
    meal_repository = SupabaseMealRepository(supabase_client)
    goals_repository = SupabaseGoalsRepository(supabase_client)
    weight_repository = SupabaseWeightRepository(supabase_client)

    return AppContainer(
        settings=resolved_settings,
        auth_service=AuthService(SupabaseAuthClient(supabase_client)),
        user_service=UserService(SupabaseProfileRepository(supabase_client)),
        daily_state_service=DailyStateService(
            food_repository=food_repository,
            meal_repository=meal_repository,
            goals_repository=goals_repository,
            default_goals=default_goals,
            cache=cache,
            cache_ttl_seconds=ttl,
        ),
        food_service=FoodService(food_repository, cache=cache, cache_ttl_seconds=ttl),
        meal_log_service=MealLogService(meal_repository, cache=cache),
        section_service=SectionService(meal_repository, cache=cache),
        goals_service=GoalsService(
            goals_repository, default_goals=default_goals, cache=cache
        ),
        weight_service=WeightService(weight_repository, cache=cache),
        photo_service=PhotoService(
            repository=SupabasePhotoRepository(supabase_client),
            storage=SupabasePhotoStorage(
                supabase_client, bucket=resolved_settings.photo_bucket
            ),
            signed_url_ttl_seconds=resolved_settings.signed_url_ttl_seconds,
        ),
        progress_service=ProgressService(
            meal_repository=meal_repository,
            weight_repository=weight_repository,
            window_days=resolved_settings.progress_window_days,
            cache=cache,
            cache_ttl_seconds=ttl,
        ),
    )
