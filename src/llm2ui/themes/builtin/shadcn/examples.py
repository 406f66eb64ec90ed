"""shadcn/ui worked examples."""

from ...models import ThemeExample

LOGIN_FORM = ThemeExample(
    id="system-form-login",
    name="Login Form",
    description="Email and password sign-in card with a submit action",
    category="form",
    tags=("login", "auth", "form", "card"),
    schema={
        "version": "1.0",
        "root": {
            "id": "login-card",
            "type": "Card",
            "props": {"className": "w-full max-w-sm"},
            "children": [
                {
                    "id": "login-header",
                    "type": "CardHeader",
                    "children": [
                        {"id": "login-title", "type": "CardTitle", "text": "Sign in"},
                        {"id": "login-desc", "type": "CardDescription", "text": "Enter your email to continue"},
                    ],
                },
                {
                    "id": "login-content",
                    "type": "CardContent",
                    "props": {"className": "grid gap-4"},
                    "children": [
                        {"id": "email-label", "type": "Label", "props": {"htmlFor": "email"}, "text": "Email"},
                        {
                            "id": "email",
                            "type": "Input",
                            "props": {"type": "email", "placeholder": "name@example.com"},
                        },
                        {"id": "password-label", "type": "Label", "props": {"htmlFor": "password"}, "text": "Password"},
                        {"id": "password", "type": "Input", "props": {"type": "password"}},
                    ],
                },
                {
                    "id": "login-footer",
                    "type": "CardFooter",
                    "children": [
                        {
                            "id": "login-submit",
                            "type": "Button",
                            "props": {"className": "w-full"},
                            "text": "Sign in",
                            "events": [{"event": "click", "action": "submit", "payload": {"form": "login"}}],
                        }
                    ],
                },
            ],
        },
    },
)

ADMIN_SIDEBAR = ThemeExample(
    id="system-layout-admin-sidebar",
    name="Admin Sidebar",
    description="Side navigation for an admin console with icon menu items",
    category="layout",
    tags=("sidebar", "admin", "navigation"),
    schema={
        "version": "1.0",
        "root": {
            "id": "sidebar",
            "type": "Container",
            "props": {"className": "w-64 h-screen flex flex-col border-r"},
            "children": [
                {
                    "id": "sidebar-title",
                    "type": "Text",
                    "props": {"className": "p-4 text-xl font-bold"},
                    "text": "Admin Panel",
                },
                {
                    "id": "menu-dashboard",
                    "type": "Button",
                    "props": {"variant": "ghost", "className": "justify-start gap-2"},
                    "children": [
                        {"id": "menu-dashboard-icon", "type": "Icon", "props": {"name": "home", "size": 16}},
                        {"id": "menu-dashboard-text", "type": "Text", "text": "Dashboard"},
                    ],
                    "events": [{"event": "click", "action": "navigate", "payload": "/dashboard"}],
                },
                {
                    "id": "menu-settings",
                    "type": "Button",
                    "props": {"variant": "ghost", "className": "justify-start gap-2"},
                    "children": [
                        {"id": "menu-settings-icon", "type": "Icon", "props": {"name": "settings", "size": 16}},
                        {"id": "menu-settings-text", "type": "Text", "text": "Settings"},
                    ],
                    "events": [{"event": "click", "action": "navigate", "payload": "/settings"}],
                },
            ],
        },
    },
)

USER_LIST = ThemeExample(
    id="system-display-user-list",
    name="User List",
    description="Data-bound list repeating one row per user",
    category="display",
    tags=("list", "loop", "binding", "users"),
    schema={
        "version": "1.0",
        "root": {
            "id": "user-list",
            "type": "Container",
            "props": {"className": "flex flex-col gap-2"},
            "children": [
                {
                    "id": "user-row",
                    "type": "Container",
                    "props": {"className": "flex items-center justify-between rounded-md border p-3"},
                    "loop": {"source": "users", "itemName": "user", "indexName": "i"},
                    "children": [
                        {"id": "user-name", "type": "Text", "text": "{{user.name}}"},
                        {
                            "id": "user-admin",
                            "type": "Badge",
                            "props": {"variant": "secondary"},
                            "condition": "{{user.admin}}",
                            "text": "Admin",
                        },
                    ],
                }
            ],
        },
        "data": {
            "users": [
                {"name": "Ada", "admin": True},
                {"name": "Grace", "admin": False},
            ]
        },
    },
)

STATS_CARDS = ThemeExample(
    id="system-dashboard-stats",
    name="Dashboard Stats",
    description="Row of metric cards bound to dashboard data",
    category="dashboard",
    tags=("dashboard", "metrics", "card", "binding"),
    schema={
        "version": "1.0",
        "root": {
            "id": "stats-grid",
            "type": "Container",
            "props": {"className": "grid grid-cols-3 gap-4"},
            "children": [
                {
                    "id": "stat-revenue",
                    "type": "Card",
                    "children": [
                        {"id": "stat-revenue-label", "type": "CardDescription", "text": "Revenue"},
                        {"id": "stat-revenue-value", "type": "CardTitle", "binding": "{{stats.revenue}}"},
                    ],
                },
                {
                    "id": "stat-users",
                    "type": "Card",
                    "children": [
                        {"id": "stat-users-label", "type": "CardDescription", "text": "Active users"},
                        {"id": "stat-users-value", "type": "CardTitle", "binding": "{{stats.users}}"},
                    ],
                },
                {
                    "id": "stat-progress",
                    "type": "Card",
                    "children": [
                        {"id": "stat-progress-label", "type": "CardDescription", "text": "Quarter goal"},
                        {"id": "stat-progress-bar", "type": "Progress", "props": {"value": 64}},
                    ],
                },
            ],
        },
        "data": {"stats": {"revenue": "$45,231", "users": 2350}},
    },
)

NOTIFICATION_SETTINGS = ThemeExample(
    id="system-form-notification-settings",
    name="Notification Settings",
    description="Toggle list with a conditional warning",
    category="form",
    tags=("settings", "switch", "condition"),
    schema={
        "version": "1.0",
        "root": {
            "id": "notify-card",
            "type": "Card",
            "children": [
                {
                    "id": "notify-header",
                    "type": "CardHeader",
                    "children": [{"id": "notify-title", "type": "CardTitle", "text": "Notifications"}],
                },
                {
                    "id": "notify-content",
                    "type": "CardContent",
                    "props": {"className": "grid gap-4"},
                    "children": [
                        {
                            "id": "notify-email",
                            "type": "Switch",
                            "props": {"checked": True},
                            "events": [{"event": "change", "action": "toggle", "payload": "email"}],
                        },
                        {
                            "id": "notify-muted-alert",
                            "type": "Alert",
                            "props": {"variant": "destructive"},
                            "condition": "settings.muted",
                            "text": "All notifications are muted",
                        },
                    ],
                },
            ],
        },
        "data": {"settings": {"muted": False}},
    },
)

EXAMPLES: tuple[ThemeExample, ...] = (
    LOGIN_FORM,
    ADMIN_SIDEBAR,
    USER_LIST,
    STATS_CARDS,
    NOTIFICATION_SETTINGS,
)
