"""
Player name resolution.

Maps a scraped participant name onto a registry player id. Tiers, first hit wins:
1. Exact name, case-insensitive
2. Registry name containing the scraped name
3. Scraped name containing a registry name

Unknown names resolve to None. Nothing here ever adds a player to the registry.
"""
import logging
from typing import Optional

logger = logging.getLogger(__name__)


class PlayerNameResolver:
    def __init__(self, registry):
        self.registry = registry

    def resolve(self, name: str) -> Optional[int]:
        """
        Resolve a scraped name to a player id.

        Args:
            name: Participant name as scraped

        Returns:
            Registry player id, or None if no tier matches
        """
        name = (name or "").strip()
        if not name:
            return None

        row = self.registry.find_player_by_exact_name(name)
        if row:
            logger.debug("Exact match: %r -> %r", name, row[1])
            return row[0]

        row = self.registry.find_player_by_name_substring(name)
        if row:
            logger.debug("Fuzzy matched: %r -> %r", name, row[1])
            return row[0]

        lowered = name.lower()
        for player_id, player_name in self.registry.list_all_player_names():
            if player_name and player_name.lower() in lowered:
                logger.debug("Reverse matched: %r -> %r", name, player_name)
                return player_id

        return None
