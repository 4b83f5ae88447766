import sys

from dictionary_assistant.cli import main

sys.exit(main())
