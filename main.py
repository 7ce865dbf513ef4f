#   Flask entry point for the MX Lab CMMS front-end
#
#   Responsibilities:
#       1. Starts the MX Lab UI server
#       2. Registers one page per sidebar entry and the parameterised detail pages
#       3. Keeps the sidebar selection in step with the displayed page (per browser session)

from __future__ import annotations

from typing import Any, Dict, Optional

from flask import Flask, jsonify, redirect, render_template, request, session
from jinja2 import ChoiceLoader, FileSystemLoader

from mxlab.config.settings_manager import SettingsManager
from mxlab.reconciler import NavigationReconciler
from mxlab.services.logging_service import logging_service
from mxlab.services.navigation_service import NavigationService
from mxlab.utils.key_value_store import MappingKeyValueStore
from mxlab.utils.paths import COMPONENT_DIR, TEMPLATE_DIR

APP_NAME = "Application MX Lab"

# Page texts for the parameterised routes that have no sidebar entry of their own
DETAIL_PAGES: Dict[str, Dict[str, str]] = {
    "intervention_details": {
        "heading": "Détails de l'intervention",
        "description": "Suivi d'une demande d'intervention jusqu'à sa clôture.",
    },
    "intervention_approval": {
        "heading": "Approbation de l'intervention",
        "description": "Approuver ou rejeter une demande d'intervention.",
    },
    "user_view": {
        "heading": "Utilisateur",
        "description": "Fiche détaillée d'un utilisateur.",
    },
    "user_edit": {
        "heading": "Modifier l'utilisateur",
        "description": "Mettre à jour les informations d'un utilisateur.",
    },
}


# Flask app with the front-end templates and static files
def create_app(settings_manager: Optional[SettingsManager] = None) -> Flask:
    settings = settings_manager or SettingsManager()
    settings.load()
    logging_service.configure_from_settings(settings.get())
    logger = logging_service.get_logger(__name__)
    navigation = NavigationService(settings)

    app = Flask(
        __name__,
        template_folder=str(TEMPLATE_DIR),
        static_folder="frontend/static",
    )
    app.secret_key = settings.secret_key

    # Page templates first, then the shared components (sidebar, topbar)
    app.jinja_loader = ChoiceLoader(
        [
            FileSystemLoader(str(TEMPLATE_DIR)),
            FileSystemLoader(str(COMPONENT_DIR)),
        ]
    )

    # Headings for every sidebar entry, taken from the menu labels
    pages: Dict[str, Dict[str, str]] = {}
    for group in navigation.config.menu:
        if group.route:
            pages[group.id] = {"heading": group.label, "description": ""}
        for sub_item in group.sub_items:
            pages[sub_item.id] = {"heading": sub_item.label, "description": group.label}
    pages.update(DETAIL_PAGES)

    # Reconciler bound to the browser session of the current request
    def session_reconciler() -> NavigationReconciler:
        return navigation.reconciler_for(MappingKeyValueStore(session))

    def navigation_payload(reconciler: NavigationReconciler) -> Dict[str, Any]:
        return {
            "state": navigation.describe_state(reconciler.state),
            "sidebar": navigation.sidebar(reconciler.state),
        }

    # Shared renderer: sync the sidebar with the requested path, then render
    def render_page(page_key: str, **context: Any):
        reconciler = session_reconciler()
        reconciler.on_route_changed(request.path)
        page = pages.get(page_key, {})
        return render_template(
            "base.html",
            app_name=APP_NAME,
            title=page.get("heading", APP_NAME),
            heading=page.get("heading", ""),
            description=page.get("description", ""),
            sidebar=navigation.sidebar(reconciler.state),
            active_item=reconciler.state.active_item_id,
            **context,
        )

    # Flask route: the login page is not part of this application
    @app.route("/")
    def index():
        return redirect(navigation.config.route_for(navigation.config.default_item_id) or "/dashboard")

    # Flask routes: one page per sidebar entry
    def make_view(page_key: str):
        def view():
            return render_page(page_key)

        return view

    for item_id, route in navigation.config.item_to_route.items():
        app.add_url_rule(route, endpoint=item_id, view_func=make_view(item_id))

    # Flask route: page "Détails de l'intervention"
    @app.route("/interventionDetails/<intervention_id>")
    def intervention_details(intervention_id: str):
        return render_page("intervention_details", record_id=intervention_id)

    # Flask route: page "Approbation de l'intervention"
    @app.route("/interventionApproval/<intervention_id>")
    def intervention_approval(intervention_id: str):
        return render_page("intervention_approval", record_id=intervention_id)

    # Flask route: page "Utilisateur"
    @app.route("/userView/<user_id>")
    def user_view(user_id: str):
        return render_page("user_view", record_id=user_id)

    # Flask route: page "Modifier l'utilisateur"
    @app.route("/userCreate/<user_id>")
    def user_edit(user_id: str):
        return render_page("user_edit", record_id=user_id)

    # Flask route: API endpoints for sidebar interaction
    # Current sidebar selection of this browser session
    @app.get("/api/sidebar/state")
    def api_sidebar_state():
        return jsonify(navigation_payload(session_reconciler()))

    # Click on a top-level menu entry
    @app.post("/api/sidebar/menu/<item_id>")
    def api_sidebar_menu(item_id: str):
        reconciler = session_reconciler()
        intent = navigation.menu_item_click(reconciler, item_id)
        payload = navigation_payload(reconciler)
        payload.update({"status": "success", "navigate": navigation.describe_intent(intent)})
        return jsonify(payload)

    # Click on a sub-item of an expanded group
    @app.post("/api/sidebar/sub/<sub_item_id>")
    def api_sidebar_sub(sub_item_id: str):
        if navigation.config.parent_of(sub_item_id) is None:
            return jsonify({"status": "error", "message": "Sous-menu inconnu."}), 404
        reconciler = session_reconciler()
        intent = reconciler.on_sub_item_clicked(sub_item_id)
        payload = navigation_payload(reconciler)
        payload.update({"status": "success", "navigate": navigation.describe_intent(intent)})
        return jsonify(payload)

    logger.info("MX Lab UI ready with %d pages", len(pages))
    # Fully configured Flask app
    return app


# Local entry point
if __name__ == "__main__":
    app = create_app()
    app.run(debug=True)
