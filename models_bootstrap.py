# models_bootstrap.py
from organization import models as _org_models
from person import models as _person_models
from teammate import models as _teammate_models
from employment import models as _employment_models
from assignment import models as _assignment_models
from ability import models as _ability_models
from maap import models as _maap_models
