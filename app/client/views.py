import logging
from collections.abc import Callable

from app.client.api import ApiError, BrandMonitorClient

logger = logging.getLogger(__name__)

LOADING = "loading"
LOADED = "loaded"
ERROR = "error"


def _log_alert(message: str) -> None:
    logger.warning("client_alert", extra={"alert": message})


class BaseView:
    def __init__(self, client: BrandMonitorClient, alert: Callable[[str], None] | None = None) -> None:
        self.client = client
        self.alert = alert or _log_alert
        self.status = LOADING
        self.error: str | None = None

    def _report(self, action: str, exc: ApiError, message: str) -> None:
        logger.error("client_request_failed", extra={"action": action, "status": exc.status_code, "detail": exc.message})
        self.alert(message)


class DashboardView(BaseView):
    """Brand list with add/edit/delete."""

    def __init__(self, client: BrandMonitorClient, alert: Callable[[str], None] | None = None) -> None:
        super().__init__(client, alert)
        self.brands: list[dict] = []

    def load(self) -> None:
        self.status = LOADING
        try:
            self.brands = self.client.list_brands()
        except ApiError as exc:
            self.status = ERROR
            self.error = exc.message
            logger.error("client_request_failed", extra={"action": "load_brands", "status": exc.status_code})
            return
        self.status = LOADED

    def add_brand(self, name: str, prompt: str = "") -> dict | None:
        if not name.strip():
            return None
        try:
            brand = self.client.create_brand(name, prompt)
        except ApiError as exc:
            self._report("add_brand", exc, "Failed to add brand")
            return None
        self.brands = [brand, *self.brands]
        return brand

    def edit_brand(self, brand_id: int, name: str, prompt: str | None) -> dict | None:
        if not name.strip():
            return None
        try:
            updated = self.client.update_brand(brand_id, name, prompt)
        except ApiError as exc:
            self._report("edit_brand", exc, "Failed to update brand")
            return None
        self.brands = [updated if brand["id"] == brand_id else brand for brand in self.brands]
        return updated

    def delete_brand(self, brand_id: int, confirm: Callable[[str], bool]) -> bool:
        if not confirm("Are you sure you want to delete this brand?"):
            return False
        try:
            self.client.delete_brand(brand_id)
        except ApiError as exc:
            self._report("delete_brand", exc, "Failed to delete brand")
            return False
        self.brands = [brand for brand in self.brands if brand["id"] != brand_id]
        return True

    @staticmethod
    def detail_path(brand: dict) -> str:
        return f"/brands/{brand['id']}"

    def render(self) -> str:
        if self.status == LOADING:
            return "Loading brands..."
        if self.status == ERROR:
            return f"Failed to load brands: {self.error}"
        if not self.brands:
            return "No brands yet. Add your first brand!"
        lines = []
        for brand in self.brands:
            line = f"[{brand['id']}] {brand['name']}"
            if brand.get("prompt"):
                line += f" - {brand['prompt']}"
            lines.append(line)
        return "\n".join(lines)


class BrandDetailView(BaseView):
    """One brand with its responses, generation and rating."""

    def __init__(self, client: BrandMonitorClient, brand_id: int, alert: Callable[[str], None] | None = None) -> None:
        super().__init__(client, alert)
        self.brand_id = brand_id
        self.brand: dict | None = None
        self.responses: list[dict] = []
        self.generating = False

    def load(self) -> None:
        self.status = LOADING
        try:
            # No single-brand endpoint; pick it out of the full list.
            brands = self.client.list_brands()
            responses = self.client.list_responses(self.brand_id)
        except ApiError as exc:
            self.status = ERROR
            self.error = exc.message
            self._report("load_brand", exc, "Failed to load brand data")
            return
        self.brand = next((brand for brand in brands if brand["id"] == self.brand_id), None)
        self.responses = responses
        self.status = LOADED

    def generate(self) -> dict | None:
        self.generating = True
        try:
            created = self.client.generate_response(self.brand_id)
        except ApiError as exc:
            self._report("generate_response", exc, "Failed to generate response")
            return None
        finally:
            self.generating = False
        row = {**created, "rating": None, "rating_id": None}
        self.responses = [row, *self.responses]
        return row

    def rate(self, response_id: int, rating: bool) -> dict | None:
        try:
            result = self.client.rate_response(response_id, rating)
        except ApiError as exc:
            self._report("rate_response", exc, "Failed to rate response")
            return None
        self.responses = [
            {**row, "rating": result["rating"], "rating_id": result["id"]} if row["id"] == response_id else row
            for row in self.responses
        ]
        return result

    def render(self) -> str:
        if self.status == LOADING:
            return "Loading brand details..."
        if self.brand is None:
            return "Brand not found"
        lines = [self.brand["name"]]
        if self.brand.get("prompt"):
            lines.append(self.brand["prompt"])
        if not self.responses:
            lines.append("No responses yet. Generate your first AI response!")
        for row in self.responses:
            marker = {True: "[+]", False: "[-]"}.get(row.get("rating"), "[ ]")
            lines.append(f"{marker} #{row['id']} {row['response_text']}")
        return "\n".join(lines)
