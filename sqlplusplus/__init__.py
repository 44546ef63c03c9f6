# Copyright (c) 2025 Kenneth Stott
#
# This source code is licensed under the Business Source License 1.1
# found in the LICENSE file in the root directory of this source tree.
#
# NOTICE: Use of this software for training artificial intelligence or
# machine learning models is strictly prohibited without explicit written
# permission from the copyright holder.

"""SQL++ - interactive SQL client.

Submodules:
- driver: SQLAlchemy connection, statements and typed cell values
- formatting: display text for cell values
- pager: paginated fetch over the active statement
- repl: input accumulation, line editing and history
- commands: meta-commands and SQL dispatch
- session: the REPL loop and its state
"""

__version__ = "0.1.0"
