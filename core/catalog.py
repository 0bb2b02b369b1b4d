# =============================================================================
# core/catalog.py  —  The Tool Catalog (pure data)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Declares every tool the server exposes: its name, the description the
#   model reads, its input fields, and the fixed (path, method) it maps to.
#
# THERE IS NO LOGIC HERE.
#   The MCP server iterates TOOLS once at startup and registers a handler
#   per entry.  Adding a tool means adding one ToolSpec below, nothing else.
#
# TOOL NAMING CONVENTIONS:
#   - *_list, get_*, *_info, *_count → read-only retrieval
#   - verbs (subscribe, star_entry)  → write operations
#   Destructive writes (unsubscribe, unstar_entry) carry destructive=True so
#   hosts can ask the user for confirmation first.
#
# THE DESCRIPTIONS MATTER.
#   The host hands each description to the LLM verbatim.  That's how it
#   decides WHICH tool to call and WHAT to pass, so every description
#   lists its arguments, its return value, and a couple of examples.
# =============================================================================

from core.models import FieldSpec, ToolHints, ToolSpec


# -----------------------------------------------------------------------------
# Shared fields
# -----------------------------------------------------------------------------
VIEW = FieldSpec(
    "view", "integer",
    "Filter by view type, 0 for Articles, 1 for Social Media, 2 for Pictures, "
    "3 for Videos, 4 for Audios, 5 for Notifications",
)
USER_ID = FieldSpec(
    "userId", "string",
    "Filter by user ID, if not provided, the current user will be used",
)
FEED_ID = FieldSpec("feedId", "string", "Filter by feed ID")
LIST_ID = FieldSpec("listId", "string", "Filter by list ID")
FEED_ID_LIST = FieldSpec("feedIdList", "string_list", "Filter by list of feed IDs")
INBOX_ID = FieldSpec("inboxId", "string", "Filter by inbox ID")

# Hints for the three shapes of tool in this catalog.
READ_ONLY = ToolHints(read_only=True, destructive=False, idempotent=True)
WRITE = ToolHints(read_only=False, destructive=False, idempotent=True)
DESTRUCTIVE = ToolHints(read_only=False, destructive=True, idempotent=True)


TOOLS: tuple[ToolSpec, ...] = (
    # =========================================================================
    # Entries
    # =========================================================================
    ToolSpec(
        name="entry_list",
        description="""Get a list of entries (articles) from Folo.

Args:
  - view (number, optional): View type filter (0=Articles, 1=Social, 2=Pictures, 3=Videos, 4=Audios, 5=Notifications)
  - feedId (string, optional): Filter by specific feed ID
  - listId (string, optional): Filter by list ID
  - feedIdList (string[], optional): Filter by multiple feed IDs
  - read (boolean, optional): Filter by read status (true=read, false=unread)
  - limit (number, optional): Max entries to return
  - publishedAfter (string, optional): ISO datetime, only entries after this date
  - publishedBefore (string, optional): ISO datetime, only entries before this date
  - isCollection (boolean, optional): Set true to get starred/collected entries only
  - withContent (boolean, optional): Include full content in response

Returns: Array of entry objects with entries, feeds, and read status metadata.

Examples:
  - Get unread articles: {view: 0, read: false, limit: 10}
  - Get starred entries: {isCollection: true}
  - Get entries with full content: {feedId: "xxx", withContent: true}""",
        path="/entries",
        http_method="POST",
        input_fields=(
            VIEW,
            FEED_ID,
            LIST_ID,
            FEED_ID_LIST,
            FieldSpec("read", "boolean", "Filter by read status"),
            FieldSpec("limit", "integer", "Limit the number of entries returned"),
            FieldSpec("publishedAfter", "datetime", "Filter by published date after this date"),
            FieldSpec("publishedBefore", "datetime", "Filter by published date before this date"),
            FieldSpec("isCollection", "boolean", "Filter by collection status, set true for Starred"),
            FieldSpec("withContent", "boolean", "Include content in the response"),
        ),
        hints=READ_ONLY,
    ),
    ToolSpec(
        name="get_entry",
        description="""Get the full content of a specific entry by its ID.

Args:
  - id (string, required): The entry ID (Snowflake ID format) to retrieve

Returns: Entry object with full content, title, author, published date, and associated feed info.

Examples:
  - Get entry details: {id: "250437246561288192"}""",
        path="/entries",
        http_method="GET",
        input_fields=(
            FieldSpec("id", "string", "The entry ID to retrieve", required=True),
        ),
        hints=READ_ONLY,
    ),

    # =========================================================================
    # Subscriptions & feeds
    # =========================================================================
    ToolSpec(
        name="subscription_list",
        description="""Get a list of RSS subscriptions from Folo.

Args:
  - view (number, optional): View type filter (0=Articles, 1=Social, 2=Pictures, 3=Videos, 4=Audios, 5=Notifications)
  - userId (string, optional): User ID, defaults to current user

Returns: Array of subscription objects with feed details, categories, and view settings.

Examples:
  - List all subscriptions: {}
  - List article subscriptions: {view: 0}""",
        path="/subscriptions",
        http_method="GET",
        input_fields=(VIEW, USER_ID),
        hints=READ_ONLY,
    ),
    ToolSpec(
        name="feed_info",
        description="""Get information about a specific RSS feed by ID or URL.

Args:
  - id (string, optional): Feed ID (Snowflake ID format)
  - url (string, optional): Feed URL

Returns: Feed object with title, description, URL, and subscriber count.

Examples:
  - Get feed by ID: {id: "41459996870678529"}
  - Get feed by URL: {url: "https://example.com/feed.xml"}""",
        path="/feeds",
        http_method="GET",
        input_fields=(
            FieldSpec("id", "string", "Feed ID"),
            FieldSpec("url", "url", "Feed URL"),
        ),
        hints=READ_ONLY,
    ),
    ToolSpec(
        name="subscribe",
        description="""Subscribe to a new RSS feed in Folo by URL. This will add the feed to the user's subscription list.

Args:
  - url (string, required): The RSS feed URL to subscribe to
  - view (number, optional): View type (0=Articles, 1=Social, etc.)
  - title (string, optional): Custom display title for the subscription
  - category (string, optional): Category to place the subscription in
  - isPrivate (boolean, optional): Whether the subscription is private

Returns: Subscription confirmation with feed details.

Examples:
  - Subscribe to a feed: {url: "https://example.com/feed.xml"}
  - Subscribe with custom title: {url: "https://example.com/feed.xml", title: "My Feed", view: 0}""",
        path="/subscriptions",
        http_method="POST",
        input_fields=(
            FieldSpec("url", "url", "The RSS feed URL to subscribe to", required=True),
            VIEW,
            FieldSpec("title", "string", "Custom title for the subscription"),
            FieldSpec("category", "string", "Category to place the subscription in"),
            FieldSpec("isPrivate", "boolean", "Whether the subscription is private"),
        ),
        # Subscribing twice is not a no-op upstream.
        hints=ToolHints(read_only=False, destructive=False, idempotent=False),
    ),
    ToolSpec(
        name="unsubscribe",
        description="""Unsubscribe from a feed in Folo. This permanently removes the feed from the user's subscription list.

Args:
  - feedId (string, required): The feed ID to unsubscribe from

Returns: Success confirmation.

Examples:
  - Unsubscribe: {feedId: "41459996870678529"}""",
        path="/subscriptions",
        http_method="DELETE",
        input_fields=(
            FieldSpec("feedId", "string", "The feed ID to unsubscribe from", required=True),
        ),
        hints=DESTRUCTIVE,
    ),
    ToolSpec(
        name="discover_feed",
        description="""Discover RSS feeds by keyword or URL. Use this to find new feeds to subscribe to.

Args:
  - keyword (string, optional): Keyword to search for feeds (e.g., "technology", "AI")
  - url (string, optional): URL to discover RSS feeds from (e.g., a blog homepage)

Returns: Array of discovered feed objects with title, description, URL, and subscriber count.

Examples:
  - Search by keyword: {keyword: "technology"}
  - Discover from URL: {url: "https://example.com"}""",
        path="/discover",
        http_method="POST",
        input_fields=(
            FieldSpec("keyword", "string", "Keyword to search for feeds"),
            FieldSpec("url", "url", "URL to discover RSS feeds from"),
        ),
        hints=READ_ONLY,
    ),

    # =========================================================================
    # Read state
    # =========================================================================
    ToolSpec(
        name="unread_count",
        description="""Get the unread count from Folo grouped by feed.

Args:
  - view (number, optional): View type filter

Returns: Object with feed IDs as keys and unread counts as values.

Examples:
  - Get all unread counts: {}
  - Get article unread counts: {view: 0}""",
        path="/reads",
        http_method="GET",
        input_fields=(VIEW,),
        hints=READ_ONLY,
    ),
    ToolSpec(
        name="mark_read",
        description="""Mark entries as read in Folo. Can mark by view, feed, list, inbox, or specific feed IDs.

Args:
  - view (number, optional): Mark all entries of this view type as read
  - feedId (string, optional): Mark entries of this feed as read
  - listId (string, optional): Mark entries of this list as read
  - inboxId (string, optional): Mark entries of this inbox as read
  - feedIdList (string[], optional): Mark entries of these feeds as read
  - startTime (number, optional): Only mark entries after this timestamp
  - endTime (number, optional): Only mark entries before this timestamp

Returns: Success confirmation.

Examples:
  - Mark all articles read: {view: 0}
  - Mark a feed read: {feedId: "41459996870678529"}""",
        path="/reads/all",
        http_method="POST",
        input_fields=(
            VIEW,
            FEED_ID,
            LIST_ID,
            INBOX_ID,
            FEED_ID_LIST,
            FieldSpec("startTime", "integer", "Only mark entries after this timestamp"),
            FieldSpec("endTime", "integer", "Only mark entries before this timestamp"),
        ),
        hints=WRITE,
    ),

    # =========================================================================
    # Collections (starred entries)
    # =========================================================================
    ToolSpec(
        name="star_entry",
        description="""Star (collect/favorite) an entry in Folo. Adds the entry to the user's starred collection.

Args:
  - entryId (string, required): The Snowflake ID of the entry to star

Returns: Success confirmation.

Examples:
  - Star an entry: {entryId: "250437246561288192"}""",
        path="/collections",
        http_method="POST",
        input_fields=(
            FieldSpec("entryId", "string", "The ID of the entry to star", required=True),
        ),
        hints=WRITE,
    ),
    ToolSpec(
        name="unstar_entry",
        description="""Unstar (remove from collection) an entry in Folo. Removes the entry from the user's starred collection.

Args:
  - entryId (string, required): The Snowflake ID of the entry to unstar

Returns: Success confirmation.

Examples:
  - Unstar an entry: {entryId: "250437246561288192"}""",
        path="/collections",
        http_method="DELETE",
        input_fields=(
            FieldSpec("entryId", "string", "The ID of the entry to unstar", required=True),
        ),
        hints=DESTRUCTIVE,
    ),

    # =========================================================================
    # Account
    # =========================================================================
    ToolSpec(
        name="get_profile",
        description="""Get the current user's profile, session info, and subscription limits.

Args: None required.

Returns: User profile with name, email, role (free/pro), subscription limits, and session expiry.

Examples:
  - Get current user info: {}""",
        path="/better-auth/get-session",
        http_method="GET",
        hints=READ_ONLY,
    ),
)


_TOOLS_BY_NAME: dict[str, ToolSpec] = {tool.name: tool for tool in TOOLS}


def get_tool(name: str) -> ToolSpec:
    """Look up a catalog entry by name.  Raises KeyError if unknown."""
    try:
        return _TOOLS_BY_NAME[name]
    except KeyError:
        raise KeyError(
            f"Unknown tool {name!r}. Available: {sorted(_TOOLS_BY_NAME)}"
        ) from None


def list_tool_names() -> list[str]:
    return [tool.name for tool in TOOLS]
