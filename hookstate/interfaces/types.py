# hookstate/interfaces/types.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import Any, Callable, Hashable

StateID = Hashable
EventID = Hashable

# Hook Types
Predicate = Callable[[Any], bool]
Action = Callable[[Any], None]
