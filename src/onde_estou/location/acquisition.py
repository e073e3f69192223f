# location/acquisition.py
import logging

from onde_estou.errors import LocationError, PermissionDenied
from onde_estou.model.models import LocationResult, LocationStatus
from .provider import Accuracy, LocationProvider, PermissionStatus

logger = logging.getLogger(__name__)


async def acquire_location(provider: LocationProvider,
                           accuracy: Accuracy = Accuracy.HIGH) -> LocationResult:
    """
    権限要求 → 現在地取得 を一度だけ行う。
    リトライ・タイムアウト・追跡はしない。失敗は結果として返し、送出しない。
    """
    try:
        status = await provider.request_foreground_permission()
        if status is not PermissionStatus.GRANTED:
            raise PermissionDenied("foreground location permission denied")
        coordinate = await provider.get_current_position(accuracy)
    except PermissionDenied as e:
        logger.warning("location permission denied: %s", e)
        return LocationResult(status=LocationStatus.DENIED, error=str(e))
    except LocationError as e:
        logger.warning("location unavailable: %s", e)
        return LocationResult(status=LocationStatus.UNAVAILABLE, error=str(e))
    except Exception as e:
        # 端末側の想定外の失敗も「取得不可」として扱う
        logger.exception("location provider failed")
        return LocationResult(status=LocationStatus.UNAVAILABLE, error=str(e) or type(e).__name__)

    logger.info("located at (%.6f, %.6f)", coordinate.latitude, coordinate.longitude)
    return LocationResult(status=LocationStatus.LOCATED, coordinate=coordinate)
