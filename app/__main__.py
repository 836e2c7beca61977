"""Main password policy module.

Copyright (c) 2024 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import sys

from pwpolicy_server import main

if __name__ == "__main__":
    sys.exit(main())
