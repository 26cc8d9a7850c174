from typing import Dict, Sequence


ClassLabel = str
FeatureVector = Sequence[float]
TrainingData = Dict[ClassLabel, Sequence[FeatureVector]]
