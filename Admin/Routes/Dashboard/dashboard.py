from flask import Blueprint
from ...Storage.storage import get_storage
from ...Utils.Response import json_response

dashboard_bp = Blueprint('dashboard', __name__, url_prefix='/api/dashboard')

@dashboard_bp.route('/stats', methods=['GET'])
def get_stats():
    stats = get_storage().get_dashboard_stats()
    return json_response(200, 'Dashboard stats retrieved successfully', data=stats)

# Chart data is mocked, see DatabaseStorage.get_activity_stats
@dashboard_bp.route('/activity', methods=['GET'])
def get_activity():
    activity = get_storage().get_activity_stats()
    return json_response(200, 'Activity retrieved successfully', data=activity)
