import threading

import pytest

from chemdesc.core.services.class_value_lookup import ClassValueLookup
from chemdesc.core.services.classifier_bridge import ClassifierBridge, ClassifierConfig
from chemdesc.exceptions import (
    InvalidParameterError,
    ModelNotTrainedError,
    TrainingDataError,
)
from chemdesc.infrastructure.repositories.training_data_repository import (
    TrainingDataRepository,
)


def test_predict_before_build():
    bridge = ClassifierBridge("PySystWithoutHetero")
    bridge.set_parameters([8.0, -0.1, 8.0, -0.1, 0.3, 0.3])
    with pytest.raises(ModelNotTrainedError):
        bridge.predict()


def test_build_and_predict_reference_dataset():
    bridge = ClassifierBridge("PySystWithoutHetero", build_now=True, options=["-C", "0.25", "-M", "2"])
    assert bridge.is_built

    bridge.set_parameters([7.803, -0.1060, 7.803, -0.1060, 0.2620, 0.2620])
    labels = bridge.predict()

    lookup = ClassValueLookup()
    assert len(labels) == 1
    assert labels[0] in lookup
    assert bridge.get_predicted() == labels
    assert set(bridge.class_values) <= set(lookup.labels)


def test_one_label_per_instance(toy_arff):
    bridge = ClassifierBridge(toy_arff, options=["-M", "1", "-U"])
    bridge.build()
    bridge.set_parameters([[0.05, 0.05], [5.05, 5.05], [9.05, 9.05]])

    assert bridge.predict() == ["05_0", "10_5", "14_9"]


def test_build_is_idempotent(toy_arff):
    bridge = ClassifierBridge(toy_arff, options=["-M", "1"])
    bridge.build()
    model = bridge._model
    bridge.build()
    assert bridge._model is model


def test_feature_width_must_match(toy_arff):
    bridge = ClassifierBridge(toy_arff, build_now=True, options=["-M", "1"])
    with pytest.raises(InvalidParameterError):
        bridge.set_parameters([1.0, 2.0, 3.0])
    with pytest.raises(InvalidParameterError):
        bridge.set_parameters([])
    with pytest.raises(InvalidParameterError):
        bridge.set_parameters(["a", "b"])


def test_predict_without_features(toy_arff):
    bridge = ClassifierBridge(toy_arff, build_now=True, options=["-M", "1"])
    with pytest.raises(InvalidParameterError):
        bridge.predict()


def test_missing_dataset():
    bridge = ClassifierBridge("NoSuchDataset")
    with pytest.raises(TrainingDataError):
        bridge.build()
    assert not bridge.is_built


def test_malformed_dataset(tmp_path):
    path = tmp_path / "bad.arff"
    path.write_text("@relation bad\n@attribute x numeric\n@data\n1.0\n")
    with pytest.raises(TrainingDataError):
        ClassifierBridge(path, build_now=True)

    garbage = tmp_path / "garbage.arff"
    garbage.write_text("this is not an arff file\n")
    with pytest.raises(TrainingDataError):
        ClassifierBridge(garbage, build_now=True)


def test_repository_lists_bundled_datasets():
    repository = TrainingDataRepository()
    assert "PySystWithoutHetero" in repository.list()

    dataset = repository.get("PySystWithoutHetero")
    assert dataset.n_attributes == 6
    assert len(dataset) == len(dataset.labels)
    assert len(dataset.class_values) == 100


def test_options_round_trip():
    config = ClassifierConfig.from_options(["-C", "0.1", "-M", "3", "-U"])
    assert config.confidence_threshold == 0.1
    assert config.min_instances_per_leaf == 3
    assert config.unpruned
    assert config.ccp_alpha == 0.0
    assert ClassifierConfig.from_options(config.to_options()) == config


def test_lower_confidence_prunes_more():
    assert ClassifierConfig(confidence_threshold=0.1).ccp_alpha > ClassifierConfig().ccp_alpha
    assert ClassifierConfig(confidence_threshold=0.5).ccp_alpha == 0.0


@pytest.mark.parametrize(
    "options",
    [["-X"], ["-C"], ["-C", "high"], ["-C", "0.9"], ["-M", "0"], ["-M", "1.5"]],
)
def test_invalid_options(options):
    with pytest.raises(InvalidParameterError):
        ClassifierConfig.from_options(options)


def test_options_frozen_after_build(toy_arff):
    bridge = ClassifierBridge(toy_arff, build_now=True, options=["-M", "1"])
    with pytest.raises(InvalidParameterError):
        bridge.set_options(["-M", "2"])


class CountingRepository(TrainingDataRepository):
    """Training data repository that counts dataset loads."""

    def __init__(self):
        super().__init__()
        self.loads = 0

    def get(self, id):
        self.loads += 1
        return super().get(id)


def test_concurrent_build_trains_once(toy_arff):
    repository = CountingRepository()
    bridge = ClassifierBridge(toy_arff, options=["-M", "1"], repository=repository)
    barrier = threading.Barrier(8)
    models = []

    def worker():
        barrier.wait()
        bridge.build()
        models.append(bridge._model)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert repository.loads == 1
    assert len(models) == 8
    assert all(model is models[0] for model in models)
    assert bridge.is_built
