"""
CLI entrypoint. Use from project root:
  python -m tiktok_automation [--topic "AI"]            # every 3 hours, forever
  python -m tiktok_automation --once [--evaluate-speech]
"""

import argparse
import sys

from tiktok_automation.domain.errors import ConfigurationError


def main(argv=None) -> int:
    from tiktok_automation import config

    parser = argparse.ArgumentParser(
        description="Generate narrated TikTok videos on a fixed schedule"
    )
    parser.add_argument("--topic", type=str, default=config.VIDEO_TOPIC, help="Story topic")
    parser.add_argument(
        "--once",
        action="store_true",
        help="Create a single video and exit instead of running on a timer",
    )
    parser.add_argument(
        "--interval-hours",
        type=float,
        default=config.TRIGGER_INTERVAL_HOURS,
        help="Hours between scheduled runs (default: %(default)s)",
    )
    parser.add_argument(
        "--evaluate-speech",
        action="store_true",
        default=config.EVALUATE_SPEECH,
        help="Review the voiceover with Gemini before merging",
    )
    args = parser.parse_args(argv)

    print("🎬 TikTok Video Creation Automation")
    print("===================================")

    try:
        config.require_settings()
    except ConfigurationError as e:
        print("⚠️  Please update the API keys in the config before running")
        print(f"   {e}")
        print("   Set them in .env or the environment")
        return 1

    from tiktok_automation.adapters import default_adapters
    from tiktok_automation.application.pipeline import ShortVideoPipeline
    from tiktok_automation.application.scheduler import Scheduler

    pipeline = ShortVideoPipeline(
        **default_adapters(),
        topic=args.topic,
        evaluate_speech=args.evaluate_speech,
    )
    scheduler = Scheduler(pipeline, interval_seconds=args.interval_hours * 3600, topic=args.topic)

    if args.once:
        run = scheduler.run_once()
        if run is None:
            return 1
        print("\n✨ Automation flow completed!")
        return 0

    scheduler.run_forever()
    return 0


if __name__ == "__main__":
    sys.exit(main())
