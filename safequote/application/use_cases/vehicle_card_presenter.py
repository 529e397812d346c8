"""Builds card presentation models from search results."""

from typing import Optional

from safequote.application.dtos.vehicle import CrashRating, Vehicle, VehicleCard
from safequote.application.use_cases.user_messages_en import UserMessagesEN
from safequote.domain.value_objects.safety_rating import MAX_SAFETY_RATING


def star_row(rating: Optional[float]) -> tuple[bool, ...]:
    """
    Compute the star row for a rating.

    Star i (0-based) is filled iff i < rating. Unrated vehicles get no stars.

    Args:
        rating: Positive rating or None

    Returns:
        Tuple of filled flags (empty when unrated)
    """
    if rating is None:
        return ()
    return tuple(index < rating for index in range(MAX_SAFETY_RATING))


class VehicleCardPresenter:
    """Maps Vehicle DTOs to VehicleCard DTOs, resolving fallback fields."""

    def present(self, vehicle: Vehicle) -> VehicleCard:
        """
        Build a card for one vehicle.

        Args:
            vehicle: Vehicle from the search response

        Returns:
            Card presentation model
        """
        rating = vehicle.resolved_rating

        crash_ratings = []
        for label, value in (
            (UserMessagesEN.FRONT_CRASH, vehicle.resolved_front_crash),
            (UserMessagesEN.SIDE_CRASH, vehicle.resolved_side_crash),
            (UserMessagesEN.ROLLOVER, vehicle.resolved_rollover_crash),
        ):
            if value is not None:
                crash_ratings.append(CrashRating(label=label, value=f"{value:.1f}"))

        return VehicleCard(
            id=vehicle.id,
            title=vehicle.title,
            type_line=vehicle.resolved_type or "",
            image_url=vehicle.resolved_image,
            rating=rating,
            stars=star_row(rating),
            crash_ratings=tuple(crash_ratings),
        )

    def present_all(self, vehicles: list[Vehicle]) -> list[VehicleCard]:
        """Build cards in input order."""
        return [self.present(vehicle) for vehicle in vehicles]
