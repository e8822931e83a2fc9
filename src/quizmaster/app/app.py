"""Point d'entrée de Quizmaster : affiche la bannière, prépare la base et les services, puis résume la courbe de niveaux."""

import logging

from quizmaster import config
from quizmaster.app.banner import startup_banner
from quizmaster.app.startup import bootstrap
from quizmaster.features.level.engine import cumulative_xp_for_level, xp_required_for_level

log = logging.getLogger(__name__)


def main() -> int:
    print(startup_banner(config.DB_PATH))
    services = bootstrap()
    log.info("%d services prêts", len(services))
    for level in (1, 2, 5, 10, 20, 50):
        log.info(
            "Niveau %-3d : %7d XP cumulée, %5d XP pour le suivant",
            level,
            cumulative_xp_for_level(level),
            xp_required_for_level(level),
        )
    return 0
