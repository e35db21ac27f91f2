import logging

from apscheduler.schedulers.blocking import BlockingScheduler

from backend.config import load_config
from sync_hackathons import run_sync

logger = logging.getLogger(__name__)


def scheduled_sync(config):
    try:
        result = run_sync(config)
        logger.info(result["message"])
    except Exception as e:
        logger.exception(f"Scheduled sync failed: {e}")


def build_scheduler(config) -> BlockingScheduler:
    scheduler = BlockingScheduler(timezone="UTC")
    scheduler.add_job(
        scheduled_sync,
        "interval",
        hours=config.sync_interval_hours,
        args=[config],
        id="sync-hackathons",
        max_instances=1,
        coalesce=True,
    )
    return scheduler


def main():
    config = load_config()
    logging.basicConfig(level=config.log_level, format='%(asctime)s %(levelname)s %(message)s')

    scheduled_sync(config)
    scheduler = build_scheduler(config)
    logger.info(f"Syncing hackathons every {config.sync_interval_hours} hours.")
    try:
        scheduler.start()
    except (KeyboardInterrupt, SystemExit):
        logger.info("Scheduler stopped.")


if __name__ == "__main__":
    main()
