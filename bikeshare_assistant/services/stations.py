import httpx
from typing import Any, List, Optional
from pydantic import TypeAdapter, ValidationError
from bikeshare_assistant.core.config import settings
from bikeshare_assistant.core.exceptions import StationServiceError
from bikeshare_assistant.core.logger import logger, log_provider_request
from bikeshare_assistant.schemas.station import Coordinate, Station
from bikeshare_assistant.services.ranking import rank_by_distance

_stations_adapter = TypeAdapter(List[Station])


class StationService:
    """Service for interacting with the bike-share provider API"""
    
    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        contract: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.base_url = settings.BIKES_API_URL if base_url is None else base_url
        self.api_key = settings.BIKES_API_KEY if api_key is None else api_key
        self.contract = settings.BIKES_CONTRACT if contract is None else contract
        self.timeout = settings.BIKES_API_TIMEOUT if timeout is None else timeout
        self.transport = transport
    
    def _parse_stations(self, data: Any) -> List[Station]:
        """
        Validate the provider body into Station records.
        
        Raises:
            StationServiceError: If the body is not a list of stations
        """
        if not isinstance(data, list):
            raise StationServiceError(
                f"Unexpected provider response: expected a list, got {type(data).__name__}"
            )
        try:
            return _stations_adapter.validate_python(data)
        except ValidationError as e:
            raise StationServiceError(
                f"Malformed station data ({e.error_count()} errors)"
            ) from e
    
    async def get_stations(self) -> List[Station]:
        """
        Fetch every station of the configured contract.
        
        Returns:
            Stations in provider order
            
        Raises:
            StationServiceError: If the API request fails or the body is unusable
        """
        try:
            logger.debug(f"Fetching stations for contract {self.contract}")
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(
                    self.base_url,
                    params={"contract": self.contract, "apiKey": self.api_key}
                )
                response.raise_for_status()
                
                stations = self._parse_stations(response.json())
                
                log_provider_request(self.contract, success=True, stations=len(stations))
                return stations
                
        except httpx.TimeoutException as e:
            log_provider_request(self.contract, success=False, error=f"Timeout (>{self.timeout}s)")
            raise StationServiceError("Station provider timeout") from e
        except httpx.HTTPStatusError as e:
            log_provider_request(
                self.contract,
                success=False,
                error=f"HTTP {e.response.status_code}: {e.response.text}"
            )
            raise StationServiceError(
                f"Station provider error (HTTP {e.response.status_code})"
            ) from e
        except httpx.RequestError as e:
            log_provider_request(self.contract, success=False, error=f"{type(e).__name__} - {str(e)}")
            raise StationServiceError("Station provider unreachable") from e
        except StationServiceError as e:
            log_provider_request(self.contract, success=False, error=e.message)
            raise
        except ValueError as e:
            # Body was not JSON
            log_provider_request(self.contract, success=False, error=f"Invalid JSON - {str(e)}")
            raise StationServiceError("Station provider returned invalid JSON") from e
    
    async def fetch_stations(self, origin: Coordinate) -> List[Station]:
        """
        Fetch stations ordered by distance from origin, nearest first.
        
        Args:
            origin: User location
            
        Returns:
            Ranked stations
        """
        stations = await self.get_stations()
        return rank_by_distance(stations, origin)


# Singleton instance
station_service = StationService()
