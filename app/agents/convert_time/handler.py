from collections import OrderedDict
from typing import List, Optional
from zoneinfo import ZoneInfoNotFoundError

from loguru import logger
from pydantic import ValidationError

from app.shared.message_utils import (
    extract_query,
    get_metadata_bool,
    get_metadata_value,
)
from app.shared.profiles import ProfileDirectory
from app.shared.task_builder import build_error_result, build_task_result
from app.timezones import (
    HostContext,
    assemble_targets,
    convert,
    disambiguation_label,
    is_valid_zone_id,
    list_invalid_favorites,
    parse,
    requery,
)
from models.a2a import A2AMessage, TaskResult
from models.time_conversion import (
    ConversionReport,
    ConvertedTime,
    ParsedQuery,
)

WARNED_FAVORITES_LIMIT = 64


class ConvertTimeAgent:
    """Rule-based time conversion agent: '7:22pm PST to CET' in, times out."""

    def __init__(
        self,
        *,
        host: HostContext,
        favorite_timezones: str = "",
        profile_directory: Optional[ProfileDirectory] = None,
    ) -> None:
        self.host = host
        self.favorite_timezones = favorite_timezones
        self.profiles = profile_directory or ProfileDirectory()
        self._warned_favorites: "OrderedDict[str, None]" = OrderedDict()
        self._logger = logger

    async def handle(
        self,
        message: A2AMessage,
        *,
        context_id: Optional[str] = None,
        task_id: Optional[str] = None,
    ) -> TaskResult:
        host, favorites = self._caller_context(message)

        reverse_payload = get_metadata_value(message, "reverse")
        if reverse_payload is not None:
            try:
                converted = ConvertedTime.model_validate(reverse_payload)
            except ValidationError as exc:
                self._logger.warning("Invalid reverse payload", error=str(exc))
                converted = None
            if converted is None or not is_valid_zone_id(converted.zone_id):
                if converted is not None:
                    self._logger.warning(
                        "Unknown zone in reverse payload", zone_id=converted.zone_id
                    )
                return build_error_result(
                    message=message,
                    error_message="Invalid conversion supplied for reverse lookup.",
                    context_id=context_id,
                    task_id=task_id,
                    data={"error_kind": "invalid_reverse"},
                )
            parsed = requery(converted)
        else:
            parsed = parse(extract_query(message))

        if not parsed.ok:
            self._logger.info(
                "Query could not be parsed",
                error_kind=parsed.error_kind.value,
                error=parsed.error,
            )
            return build_error_result(
                message=message,
                error_message=parsed.error,
                context_id=context_id,
                task_id=task_id,
                data={"error_kind": parsed.error_kind.value},
            )

        logger.info(
            "Parsed query",
            time_text=parsed.time_text,
            source_zone=parsed.source_zone,
            target_zone=parsed.target_zone,
        )

        invalid_favorites = self._check_favorites(favorites)

        try:
            conversions = self.convert_all(parsed, favorites, host=host)
        except ZoneInfoNotFoundError as exc:
            logger.exception("Resolved zone missing from tz database", error=str(exc))
            return build_error_result(
                message=message,
                error_message="Timezone data unavailable for this conversion.",
                context_id=context_id,
                task_id=task_id,
                data={"error_kind": "zone_data", "details": str(exc)},
            )

        report = ConversionReport(
            title=f"{parsed.time_text} {parsed.source_label}",
            summary=" = ".join(item.display_text for item in conversions),
            query=parsed,
            conversions=conversions,
            invalid_favorites=invalid_favorites,
        )
        logger.info(
            "Successfully built time conversion result",
            targets=[item.zone_id for item in conversions],
        )
        return build_task_result(
            message=message,
            context_id=context_id,
            task_id=task_id,
            text_parts=[
                "\n".join(
                    [f"{report.title}: {report.summary}"]
                    + [item.row_text for item in conversions]
                )
            ],
            data_parts=[{"time_conversion": report.model_dump(mode="json")}],
        )

    def convert_all(
        self,
        parsed: ParsedQuery,
        favorites: str,
        *,
        host: Optional[HostContext] = None,
    ) -> List[ConvertedTime]:
        host = host or self.host
        return [
            convert(
                parsed.hour,
                parsed.minute,
                parsed.source_zone,
                target.zone_id,
                target.label
                or disambiguation_label(target.zone_id, parsed.source_label),
                host=host,
            )
            for target in assemble_targets(parsed, favorites, host=host)
        ]

    def _caller_context(self, message: A2AMessage):
        host = self.host
        favorites = self.favorite_timezones

        user = get_metadata_value(message, "user")
        profile = self.profiles.get(str(user)) if user else None
        if profile is not None:
            logger.debug("Using caller profile", user=profile.user)
            host = host.with_overrides(local_zone=profile.timezone, hour12=profile.hour12)
            if profile.favorite_timezones is not None:
                favorites = profile.favorite_timezones

        local_zone = get_metadata_value(message, "local_timezone")
        if local_zone:
            if is_valid_zone_id(local_zone):
                host = host.with_overrides(local_zone=local_zone)
            else:
                logger.warning("Ignoring unknown local_timezone", local_timezone=local_zone)

        override = get_metadata_value(message, "favorite_timezones")
        if isinstance(override, str):
            favorites = override

        return host.with_overrides(hour12=get_metadata_bool(message, "hour12")), favorites

    def _check_favorites(self, favorites: str) -> List[str]:
        invalid = list_invalid_favorites(favorites)
        if not invalid:
            return invalid
        if favorites in self._warned_favorites:
            self._warned_favorites.move_to_end(favorites)
            return invalid
        self._warned_favorites[favorites] = None
        # oldest strings are forgotten and may warn again
        while len(self._warned_favorites) > WARNED_FAVORITES_LIMIT:
            self._warned_favorites.popitem(last=False)
        logger.warning("Skipping unknown timezone(s)", entries=invalid)
        return invalid
