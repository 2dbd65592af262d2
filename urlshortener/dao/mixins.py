"""Connectivity check shared by the store client mixins.

Classes:
    - StoreHealthcheckMixin: PING the data store, translate driver errors to DataStoreError.

Subclasses provide three things:
    - driver_error: base exception class of the store driver
    - _ping(): a cheap round trip to the store
    - _store_description(): human-readable store location used in error messages
"""

from urlshortener.dao.exceptions import DataStoreError


class StoreHealthcheckMixin:
    driver_error: type[Exception] = Exception

    def _ping(self) -> None:
        raise NotImplementedError

    def _store_description(self) -> str:
        raise NotImplementedError

    def _healthcheck(self, raise_error: bool = True) -> bool:
        """PING the data store to healthcheck connectivity

        Args:
            raise_error (bool):
                If True, raises DataStoreError on failure. Defaults to True.

        Returns:
            bool:
                True if the store is reachable, False otherwise (only if raise_error=False).

        Raises:
            DataStoreError:
                If any driver error occurs during the ping and raise_error=True.
        """
        try:
            self._ping()
        except self.driver_error as e:
            if raise_error:
                raise DataStoreError(f"Can't connect to {self._store_description()}. Check the provided configuration parameters.") from e
            return False
        else:
            return True
