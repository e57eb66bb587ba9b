"""Precomputed fixed-point square roots for the integers 0..127.

``SQUARE_ROOTS[k]`` is the Q16.16 root returned for ``k << 16``. Several entries
sit one unit above the exact value (``SQUARE_ROOTS[4] == 131073``); they are the
historical values and must not be regenerated.
"""

from __future__ import annotations

SQUARE_ROOTS: tuple[int, ...] = (
    0, 65536, 92682, 113511, 131073, 146543, 160529, 173392,
    185363, 196608, 207243, 217359, 227023, 236293, 245213, 253819,
    262145, 270211, 278045, 285665, 293086, 300323, 307391, 314299,
    321059, 327680, 334169, 340535, 346784, 352923, 358955, 364889,
    370727, 376475, 382137, 387717, 393216, 398640, 403991, 409273,
    414487, 419635, 424721, 429749, 434717, 439629, 444487, 449293,
    454047, 458752, 463409, 468021, 472587, 477109, 481589, 486028,
    490427, 494786, 499107, 503391, 507639, 511853, 516031, 520175,
    524289, 528369, 532417, 536435, 540423, 544383, 548313, 552217,
    556091, 559939, 563762, 567559, 571329, 575077, 578799, 582497,
    586171, 589824, 593453, 597061, 600647, 604213, 607755, 611279,
    614783, 618265, 621729, 625173, 628599, 632007, 635395, 638765,
    642119, 645455, 648773, 652075, 655360, 658629, 661881, 665117,
    668339, 671545, 674735, 677909, 681071, 684215, 687347, 690465,
    693567, 696657, 699733, 702795, 705845, 708881, 711903, 714913,
    717911, 720896, 723869, 726829, 729779, 732715, 735639, 738553,
)

SQUARE_ROOT_TABLE_SIZE: int = len(SQUARE_ROOTS)
