from celery import shared_task
import logging

from .client import LeadAPIClient

logger = logging.getLogger(__name__)


@shared_task(ignore_result=True)
def track_utm_click(url):
    """
    Report a long-URL click on the lead form to the Lead API.
    Tracking is best effort: failures are logged and dropped.
    """
    success, _, error = LeadAPIClient().track_click(url)
    if not success:
        logger.warning(f"Click tracking failed for {url}: {error or 'no response'}")
    return success
