from fitbit_api.services.activity import ActivityService
from fitbit_api.services.body import BodyService
from fitbit_api.services.devices import DevicesService
from fitbit_api.services.heart_rate import HeartRateService
from fitbit_api.services.sleep import SleepService
from fitbit_api.services.subscription import SubscriptionService
from fitbit_api.services.user import UserService

__all__ = [
    'ActivityService',
    'BodyService',
    'DevicesService',
    'HeartRateService',
    'SleepService',
    'SubscriptionService',
    'UserService',
]
