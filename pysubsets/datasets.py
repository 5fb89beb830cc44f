"""
Reference datasets for best-subsets validation and examples.

Prostate cancer data (Stamey et al., 1989), as distributed with
"The Elements of Statistical Learning": 97 men about to receive a
radical prostatectomy. The response is lpsa (log prostate-specific
antigen); the eight clinical measures are the candidate predictors.

Observation 32 carries the corrected lweight of 3.804438; the ESL file
has the transcription error 6.107580.

    lcavol   log cancer volume
    lweight  log prostate weight
    age      age in years
    lbph     log benign prostatic hyperplasia amount
    svi      seminal vesicle invasion (0/1)
    lcp      log capsular penetration
    gleason  Gleason score
    pgg45    percent of Gleason scores 4 or 5
    lpsa     log prostate-specific antigen (response)
"""

import numpy as np

from pysubsets.core.datasource import DataSource

PROSTATE_COLUMNS = (
    'lcavol', 'lweight', 'age', 'lbph', 'svi', 'lcp', 'gleason', 'pgg45', 'lpsa',
)

PROSTATE_PREDICTORS = PROSTATE_COLUMNS[:-1]

PROSTATE_RESPONSE = 'lpsa'

prostate = np.array([
    [-0.579818495, 2.769459, 50, -1.386294, 0, -1.386294, 6, 0, -0.4307829],
    [-0.994252273, 3.319626, 58, -1.386294, 0, -1.386294, 6, 0, -0.1625189],
    [-0.510825624, 2.691243, 74, -1.386294, 0, -1.386294, 7, 20, -0.1625189],
    [-1.203972804, 3.282789, 58, -1.386294, 0, -1.386294, 6, 0, -0.1625189],
    [0.751416089, 3.432373, 62, -1.386294, 0, -1.386294, 6, 0, 0.3715636],
    [-1.049822124, 3.228826, 50, -1.386294, 0, -1.386294, 6, 0, 0.7654678],
    [0.737164066, 3.473518, 64, 0.615186, 0, -1.386294, 6, 0, 0.7654678],
    [0.693147181, 3.539509, 58, 1.536867, 0, -1.386294, 6, 0, 0.8544153],
    [-0.776528789, 3.539509, 47, -1.386294, 0, -1.386294, 6, 0, 1.0473190],
    [0.223143551, 3.244544, 63, -1.386294, 0, -1.386294, 6, 0, 1.0473190],
    [0.254642218, 3.604138, 65, -1.386294, 0, -1.386294, 6, 0, 1.2669476],
    [-1.347073648, 3.598681, 63, 1.266948, 0, -1.386294, 6, 0, 1.2669476],
    [1.613429934, 3.022861, 63, -1.386294, 0, -0.597837, 7, 30, 1.2669476],
    [1.477048724, 2.998229, 67, -1.386294, 0, -1.386294, 7, 5, 1.3480731],
    [1.205970807, 3.442019, 57, -1.386294, 0, -0.430783, 7, 5, 1.3987169],
    [1.541159072, 3.061052, 66, -1.386294, 0, -1.386294, 6, 0, 1.4469190],
    [-0.415515444, 3.516013, 70, 1.244155, 0, -0.597837, 7, 30, 1.4701758],
    [2.288486169, 3.649359, 66, -1.386294, 0, 0.371564, 6, 0, 1.4929041],
    [-0.562118918, 3.267666, 41, -1.386294, 0, -1.386294, 6, 0, 1.5581446],
    [0.182321557, 3.825375, 70, 1.658228, 0, -1.386294, 6, 0, 1.5993876],
    [1.147402453, 3.419365, 59, -1.386294, 0, -1.386294, 6, 0, 1.6389967],
    [2.059238834, 3.501043, 60, 1.474763, 0, 1.348073, 7, 20, 1.6582281],
    [-0.544727175, 3.375880, 59, -0.798508, 0, -1.386294, 6, 0, 1.6956156],
    [1.781709133, 3.451574, 63, 0.438255, 0, 1.178655, 7, 60, 1.7137979],
    [0.385262401, 3.667400, 69, 1.599388, 0, -1.386294, 6, 0, 1.7316555],
    [1.446918983, 3.124565, 68, 0.300105, 0, -1.386294, 6, 0, 1.7664417],
    [0.512823626, 3.719651, 65, -1.386294, 0, -0.798508, 7, 70, 1.8000583],
    [-0.400477567, 3.865979, 67, 1.816452, 0, -1.386294, 7, 20, 1.8164521],
    [1.040276712, 3.128951, 67, 0.223144, 0, 0.048790, 7, 80, 1.8484548],
    [2.409644165, 3.375880, 65, -1.386294, 0, 1.619388, 6, 0, 1.8946169],
    [0.285178942, 4.090169, 65, 1.962908, 0, -0.798508, 6, 0, 1.9242487],
    [0.182321557, 3.804438, 65, 1.704748, 0, -1.386294, 6, 0, 2.0082140],
    [1.275362800, 3.037354, 71, 1.266948, 0, -1.386294, 6, 0, 2.0082140],
    [0.009950331, 3.267666, 54, -1.386294, 0, -1.386294, 6, 0, 2.0215476],
    [-0.010050336, 3.216874, 63, -1.386294, 0, -0.798508, 6, 0, 2.0476928],
    [1.308332820, 4.119850, 64, 2.171337, 0, -1.386294, 7, 5, 2.0856721],
    [1.423108334, 3.657131, 73, -0.579819, 0, 1.658228, 8, 15, 2.1575593],
    [0.457424847, 2.374906, 64, -1.386294, 0, -1.386294, 7, 15, 2.1916535],
    [2.660958594, 4.085136, 68, 1.373716, 1, 1.832581, 7, 35, 2.2137539],
    [0.797507196, 3.013081, 56, 0.936093, 0, -0.162519, 7, 5, 2.2772673],
    [0.620576488, 3.141995, 60, -1.386294, 0, -1.386294, 9, 80, 2.2975726],
    [1.442201993, 3.682610, 68, -1.386294, 0, -1.386294, 7, 10, 2.3075726],
    [0.582215620, 3.865979, 62, 1.713798, 0, -0.430783, 6, 0, 2.3272777],
    [1.771556762, 3.896909, 61, -1.386294, 0, 0.810930, 7, 6, 2.3749058],
    [1.486139696, 3.409496, 66, 1.749200, 0, -0.430783, 7, 20, 2.5217206],
    [1.663926098, 3.392829, 61, 0.615186, 0, -1.386294, 7, 15, 2.5533438],
    [2.727852828, 3.995445, 79, 1.879465, 1, 2.656757, 9, 100, 2.5687881],
    [1.163150810, 4.035125, 68, 1.713798, 0, -0.430783, 7, 40, 2.5687881],
    [1.745715531, 3.498022, 43, -1.386294, 0, -1.386294, 6, 0, 2.5915164],
    [1.220829921, 3.568123, 70, 1.373716, 0, -0.798508, 6, 0, 2.5915164],
    [1.091923301, 3.993603, 68, -1.386294, 0, -1.386294, 7, 50, 2.6567569],
    [1.660131027, 4.234831, 64, 2.073172, 0, -1.386294, 6, 0, 2.6775910],
    [0.512823626, 3.633631, 64, 1.492904, 0, 0.048790, 7, 70, 2.6844403],
    [2.127040520, 4.121473, 68, 1.766442, 0, 1.446919, 7, 40, 2.6912431],
    [3.153590358, 3.516013, 59, -1.386294, 0, -1.386294, 7, 5, 2.7047113],
    [1.266947603, 4.280132, 66, 2.122262, 0, -1.386294, 7, 15, 2.7180005],
    [0.974559640, 2.865054, 47, -1.386294, 0, 0.500775, 7, 4, 2.7880929],
    [0.463734016, 3.764682, 49, 1.423108, 0, -1.386294, 6, 0, 2.7942279],
    [0.542324291, 4.178226, 70, 0.438255, 0, -1.386294, 7, 20, 2.8063861],
    [1.061256502, 3.851211, 61, 1.294727, 0, -1.386294, 7, 40, 2.8124102],
    [0.457424847, 4.524502, 73, 2.326302, 0, -1.386294, 6, 0, 2.8419982],
    [1.997417706, 3.719651, 63, 1.619388, 1, 1.909543, 7, 40, 2.8535925],
    [2.775708850, 3.524889, 72, -1.386294, 0, 1.558145, 9, 95, 2.8535925],
    [2.034705648, 3.917011, 66, 2.008214, 1, 2.110213, 7, 60, 2.8820035],
    [2.073171929, 3.623007, 64, -1.386294, 0, -1.386294, 6, 0, 2.8820035],
    [1.458615023, 3.836221, 61, 1.321756, 0, -0.430783, 7, 20, 2.8875901],
    [2.022871190, 3.878466, 68, 1.783391, 0, 1.321756, 7, 70, 2.9204698],
    [2.198335072, 4.050915, 72, 2.307573, 0, -0.430783, 7, 10, 2.9626924],
    [-0.446287103, 4.408547, 69, -1.386294, 0, -1.386294, 6, 0, 2.9626924],
    [1.193922468, 4.780383, 72, 2.326302, 0, -0.798508, 7, 5, 2.9729753],
    [1.864080131, 3.593194, 60, -1.386294, 1, 1.321756, 7, 60, 3.0130809],
    [1.160020917, 3.341093, 77, 1.749200, 0, -1.386294, 7, 25, 3.0373539],
    [1.214912744, 3.825375, 69, -1.386294, 1, 0.223144, 7, 20, 3.0563569],
    [1.838961071, 3.236716, 60, 0.438255, 1, 1.178655, 9, 90, 3.0750055],
    [2.999226163, 3.849083, 69, -1.386294, 1, 1.909543, 7, 20, 3.2752562],
    [3.141130476, 3.263849, 68, -0.051293, 1, 2.420368, 7, 50, 3.3375474],
    [2.010894999, 4.433789, 72, 2.122262, 0, 0.500775, 7, 60, 3.3928291],
    [2.537657215, 4.354784, 78, 2.326302, 0, -1.386294, 7, 10, 3.4355988],
    [2.648300197, 3.582129, 69, -1.386294, 1, 2.583998, 7, 70, 3.4578927],
    [2.779440197, 3.823192, 63, -1.386294, 0, 0.371564, 7, 50, 3.5130369],
    [1.467874348, 3.070376, 66, 0.559616, 0, 0.223144, 7, 40, 3.5160131],
    [2.513656063, 3.473518, 57, 0.438255, 0, 2.327278, 7, 60, 3.5307626],
    [2.613006652, 3.888754, 77, -0.527633, 1, 0.558779, 7, 30, 3.5652984],
    [2.677590994, 3.838376, 65, 1.115142, 0, 1.749200, 9, 70, 3.5709402],
    [1.562346305, 3.709907, 60, 1.695616, 0, 0.810930, 7, 30, 3.5876769],
    [3.302849259, 3.518980, 64, -1.386294, 1, 2.327278, 7, 60, 3.6309855],
    [2.024193067, 3.731699, 58, 1.638997, 0, -1.386294, 6, 0, 3.6800909],
    [1.731655545, 3.369018, 62, -1.386294, 1, 0.300105, 7, 30, 3.7123518],
    [2.807593831, 4.718052, 65, -1.386294, 1, 2.463853, 7, 60, 3.9843437],
    [1.562346305, 3.695110, 76, 0.936093, 1, 0.810930, 7, 75, 3.9936030],
    [3.246490992, 4.101817, 68, -1.386294, 0, -1.386294, 6, 0, 4.0298060],
    [2.532902848, 3.677566, 61, 1.348073, 1, -1.386294, 7, 15, 4.1295508],
    [2.830267834, 3.876396, 68, -1.386294, 1, 1.321756, 7, 60, 4.3851468],
    [3.821003607, 3.896909, 44, -1.386294, 1, 2.169054, 7, 40, 4.6844434],
    [2.907447359, 3.396185, 52, -1.386294, 1, 2.463853, 7, 10, 5.1431245],
    [2.882563575, 3.773910, 68, 1.558145, 1, 1.558145, 7, 80, 5.4775090],
    [3.471966453, 3.974998, 68, 0.438255, 1, 2.904165, 7, 20, 5.5829322],
])


def load_prostate() -> DataSource:
    """
    Prostate cancer data as a DataSource with named columns.

    Example:
        >>> ds = load_prostate()
        >>> design = SubsetDesign.from_datasource(ds, y='lpsa')
    """
    return DataSource.from_arrays(data=prostate.copy(), columns=list(PROSTATE_COLUMNS))
