import logging
from typing import Any, Dict, List, Mapping, Optional

from ..errors import RemoteCallError
from ..session import TOKEN_PLACEHOLDER, SessionManager
from .models import Category, ProgramDetail
from .parser import day_steps, normalize_search_params, parse_categories, parse_ids, parse_program_detail

logger = logging.getLogger(__name__)


class CatalogModule:
    def __init__(self, session: SessionManager):
        """
        Initialize catalog module.

        Args:
            session: Session manager that performs the remote calls
        """
        self.session = session

    @property
    def group_id(self) -> Optional[int]:
        return self.session.config.group_id

    def _base_params(self) -> Dict[str, Any]:
        return {"authCode": TOKEN_PLACEHOLDER, "groupId": self.group_id}

    async def search(self, params: Optional[Mapping[str, Any]] = None) -> List[int]:
        """
        Search VOD programs.

        Args:
            params: Any of ``groupId``, ``progDate``, ``name``,
                ``description``, ``updateTime``. Dates may be passed as
                date/datetime objects.

        Returns:
            Matching program ids, in the order the API returned them
        """
        opts = normalize_search_params(params, self._base_params())
        logger.debug(f"[list] options={_loggable(opts)}")

        response = await self.session.execute("searchVodPrograms", opts)
        ids = parse_ids(response)

        logger.debug(f"[list] ids={ids}")
        return ids

    list = search

    async def range(self, start: Any, end: Any) -> List[int]:
        """
        Search program ids day by day over [start, end).

        One search per 24-hour step, run sequentially; results are
        concatenated in day order.

        Args:
            start: First day (inclusive); datetime, date, ISO string or epoch seconds
            end: End boundary (exclusive), same accepted types
        """
        steps = day_steps(start, end)
        logger.debug(f"[range] start={start} end={end} days={len(steps)}")

        found: List[int] = []
        for day in steps:
            found.extend(await self.search({"progDate": day}))

        logger.debug(f"[range] found={len(found)}")
        return found

    async def categories(self) -> List[Category]:
        """Load all categories of the configured group."""
        opts = self._base_params()
        logger.debug(f"[categories] options={_loggable(opts)}")

        response = await self.session.execute("getCategories", opts)
        categories = parse_categories(response)

        logger.debug(f"[categories] found={len(categories)}")
        return categories

    async def details(self, program_id: int) -> ProgramDetail:
        """
        Load the details of one program.

        Raises:
            RemoteCallError: The response carried no program detail
        """
        opts = {"authCode": TOKEN_PLACEHOLDER, "programId": program_id}
        logger.debug(f"[details] options={_loggable(opts)}")

        response = await self.session.execute("getProgramDetail", opts)
        detail = parse_program_detail(response)
        if detail is None:
            raise RemoteCallError(f"No program detail returned for program {program_id}")

        logger.debug(f"[details] programId={detail.program_id}")
        return detail


def _loggable(opts: Mapping[str, Any]) -> Dict[str, Any]:
    """Options without the token placeholder."""
    return {key: value for key, value in opts.items() if key != "authCode"}
