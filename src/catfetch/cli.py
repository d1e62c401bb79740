"""Interactive terminal front end for fetching cat images and facts."""

import logging

from .config import AppConfig, load_config
from .errors import RemoteError
from .logging import JSONLLogger
from .models import CatRecord
from .sources import RemoteCatSource
from .storage import FileStorage, RecordStore
from .storage.records import Storage
from .workflow import CatSource, FetchWorkflow

logger = logging.getLogger(__name__)


BANNER = """
╔══════════════════════════════════════════╗
║            🐱 catfetch v0.1.0            ║
║      Random cat images and cat facts     ║
╚══════════════════════════════════════════╝

Commands:
  <Enter>, /fetch  - Fetch a new cat image and fact
  /history         - List fetched records
  /show N          - Show record N and download its image
  /saved           - Count records saved to the data file
  /help            - Show this help
  /exit, /quit     - Exit
"""


class CLI:
    """Interactive command-line interface for catfetch."""

    def __init__(
        self,
        config: AppConfig | None = None,
        source: CatSource | None = None,
        storage: Storage | None = None,
        event_logger: JSONLLogger | None = None,
    ) -> None:
        self.config = config or load_config()
        self._owned_source: RemoteCatSource | None = None
        if source is None:
            source = self._owned_source = RemoteCatSource(self.config)
        self.source = source

        assert self.config.data_file is not None
        assert self.config.log_dir is not None
        self.store = RecordStore(storage or FileStorage(), self.config.data_file)

        self.logger = event_logger or JSONLLogger(self.config.log_dir)
        self.workflow = FetchWorkflow(
            self.source,
            self.store,
            seed_examples=self.config.seed_examples,
            event_logger=self.logger,
        )
        self.logger.session_id = self.workflow.owner_label

        self.workflow.status.subscribe(self._on_status)
        self.store.subscribe(self._on_history)

    @property
    def session_id(self) -> str:
        return self.workflow.owner_label

    async def aclose(self) -> None:
        """Close the cat source if this CLI created it."""
        if self._owned_source is not None:
            await self._owned_source.aclose()

    def _log(self, event: str, **fields: object) -> None:
        try:
            self.logger.log(event, **fields)
        except OSError as e:
            logger.warning("Failed to write %s event to %s: %s", event, self.logger.log_path, e)

    def _on_status(self, text: str) -> None:
        print(f"\n{text}")

    def _on_history(self, records: tuple[CatRecord, ...]) -> None:
        print(f"   ({len(records)} record(s) in history)")

    def _format_record(self, index: int, record: CatRecord) -> str:
        """Format one history entry for display."""
        captured = record.captured_at.strftime("%Y-%m-%d %H:%M:%S UTC")
        image = record.image_url or "(no image)"
        return f"[{index}] {captured}  {record.owner_label}\n    {image}\n    {record.fact}"

    def _format_history(self) -> str:
        records = self.store.all()
        if not records:
            return "No records yet. Press Enter to fetch one."
        return "\n".join(
            self._format_record(i, record) for i, record in enumerate(records, 1)
        )

    async def _fetch(self) -> None:
        """Run one fetch cycle and describe the image it produced."""
        outcome = await self.workflow.fetch()
        if outcome.has_image:
            print(f"🖼  {outcome.image_url}")
        else:
            print("🖼  (no image)")

    async def _show(self, argument: str) -> None:
        """Show a history entry and download its image bytes."""
        try:
            index = int(argument)
        except ValueError:
            print("Usage: /show N")
            return

        if not 1 <= index <= len(self.store):
            print(f"No record {index}. History has {len(self.store)} record(s).")
            return

        record = self.store[index - 1]
        print(self._format_record(index, record))

        try:
            image = await self.workflow.load_image(record.image_url)
        except RemoteError as e:
            print(f"❌ An error occurred while loading the image: {e}")
            self._log("image_load_failed", image_url=record.image_url, error=str(e))
            return

        if image is None:
            print("    (no image)")
        else:
            content_type = image.content_type or "unknown type"
            print(f"    image: {image.size} bytes, {content_type}")

    def _saved_count(self) -> int:
        return len(self.store.load_persisted())

    async def _handle_command(self, command: str) -> bool:
        """Handle a command. Returns True if should continue, False to exit."""
        cmd, _, argument = command.strip().partition(" ")
        cmd = cmd.lower()

        if cmd in ("/exit", "/quit", "exit", "quit"):
            print("\n👋 Goodbye!")
            self._log("session_end", records=len(self.store))
            return False

        if cmd in ("", "/fetch"):
            await self._fetch()
            return True

        if cmd == "/history":
            print(self._format_history())
            return True

        if cmd == "/show":
            await self._show(argument.strip())
            return True

        if cmd == "/saved":
            try:
                count = self._saved_count()
            except OSError as e:
                print(f"❌ Cannot read {self.store.path}: {e}")
                return True
            print(f"{count} record(s) saved in {self.store.path}")
            return True

        if cmd == "/help":
            print(BANNER)
            return True

        print(f"Unknown command: {cmd}. Type /help for commands.")
        return True

    async def run(self) -> None:
        """Run the interactive CLI."""
        print(BANNER)
        print(f"Session: {self.session_id}\n")
        self._log("session_start", records=len(self.store))

        while True:
            try:
                user_input = input("cat> ")
            except (KeyboardInterrupt, EOFError):
                print("\n👋 Goodbye!")
                self._log("session_interrupt")
                break

            if not await self._handle_command(user_input):
                break


async def run_cli() -> None:
    """Run the CLI with configuration from the environment."""
    cli = CLI(config=load_config())
    try:
        await cli.run()
    finally:
        await cli.aclose()
