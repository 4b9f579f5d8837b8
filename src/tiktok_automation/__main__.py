import sys

from tiktok_automation.cli import main

sys.exit(main())
