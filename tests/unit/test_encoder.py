"""Unit tests for editor tree → pipeline JSON encoding."""

import pytest

from pipedit.convert import UNNAMED_LISTED, encode_pipeline, encode_stage, encode_step, encode_steps
from pipedit.errors import ValidationError
from pipedit.models import Pipeline, StageNode, StepNode, literal


def cell(value):
    return {"isLiteral": True, "value": value}


def test_basic(steps):
    tree = Pipeline(
        stages=[
            StageNode(
                name="stage 1",
                steps=[StepNode(name="sh", data={"script": literal("echo hello")})],
            )
        ]
    )
    out = encode_pipeline(tree, steps)
    assert out == {
        "pipeline": {
            "agent": cell("any"),
            "stages": [
                {
                    "name": "stage 1",
                    "branches": [
                        {
                            "name": "default",
                            "steps": [{"name": "sh", "arguments": cell("echo hello")}],
                        }
                    ],
                }
            ],
        }
    }


def test_new_style_parallel(steps):
    top = StageNode(
        name="top stage",
        children=[
            StageNode(name="stage 1", steps=[StepNode(name="sh", data={"script": "echo 1"})]),
            StageNode(name="stage 2", steps=[StepNode(name="sh", data={"script": "echo 2"})]),
        ],
    )
    out = encode_stage(top, steps)
    assert "branches" not in out
    assert [child["name"] for child in out["parallel"]] == ["stage 1", "stage 2"]
    assert out["parallel"][1]["branches"][0]["steps"][0]["arguments"] == "echo 2"


def test_nested_parallel(steps):
    top = StageNode(
        name="outer",
        children=[StageNode(name="inner", children=[StageNode(name="leaf")])],
    )
    out = encode_stage(top, steps)
    assert out["parallel"][0]["parallel"][0]["name"] == "leaf"


def test_empty_stage_gets_empty_default_branch(steps):
    assert encode_stage(StageNode(name="new"), steps) == {
        "name": "new",
        "branches": [{"name": "default", "steps": []}],
    }


def test_wrapper_with_named_parameter(steps):
    wrapper = StepNode(
        name="withAnt",
        data={"installation": literal("default")},
        is_container=True,
        children=[StepNode(name="echo", data={"message": literal("hello")})],
    )
    out = encode_step(wrapper, steps)
    assert out["arguments"][0]["key"] == "installation"
    assert out["children"] == [{"name": "echo", "arguments": cell("hello")}]


def test_wrapper_with_positional_parameter_is_compact(steps):
    wrapper = StepNode(
        name="withSonarQubeEnv",
        data={"installationName": literal("default")},
        is_container=True,
        children=[StepNode(name="echo", data={"message": literal("hello")})],
    )
    out = encode_step(wrapper, steps)
    assert out["arguments"] == cell("default")
    assert out["children"][0]["name"] == "echo"


def test_container_without_children_omits_children(steps):
    out = encode_step(StepNode(name="withAnt", is_container=True), steps)
    assert out == {"name": "withAnt", "arguments": []}


def test_unknown_step_arguments(steps):
    step = StepNode(name="unknownStep", data={"someArgument": literal(5)})
    assert encode_step(step, steps)["arguments"] == [
        {"key": "someArgument", "value": cell(5)}
    ]
    listed = StepNode(name="unknownStep", data={UNNAMED_LISTED: literal(5)})
    assert encode_step(listed, steps)["arguments"] == [cell(5)]


def test_unknown_sections_are_restored(steps):
    tree = Pipeline(
        stages=[
            StageNode(
                name="foo",
                steps=[StepNode(name="sh", data={"script": "ls"}, unknown={"when": "x"})],
                unknown={"stageUnknownSection": {"someStageKey": "someStageValue"}},
            )
        ],
        unknown={"someUnknownSection": {"someKey": "someValue"}},
    )
    out = encode_pipeline(tree, steps)["pipeline"]
    assert out["someUnknownSection"] == {"someKey": "someValue"}
    assert out["stages"][0]["stageUnknownSection"] == {"someStageKey": "someStageValue"}
    assert out["stages"][0]["branches"][0]["steps"][0]["when"] == "x"


def test_emitted_keys_win_over_unknown(steps):
    node = StageNode(name="real", unknown={"name": "stale", "extra": 1})
    out = encode_stage(node, steps)
    assert out["name"] == "real"
    assert out["extra"] == 1


def test_stage_without_name(steps):
    tree = Pipeline(stages=[StageNode(name="ok"), StageNode()])
    with pytest.raises(ValidationError, match="stage has no name") as exc:
        encode_pipeline(tree, steps)
    assert exc.value.path == "pipeline.stages[1]"


def test_step_without_name(steps):
    stage = StageNode(
        name="s",
        steps=[StepNode(name="timeout", children=[StepNode(name="")])],
    )
    with pytest.raises(ValidationError) as exc:
        encode_stage(stage, steps)
    assert exc.value.path == "stage.steps[0].children[0]"


def test_stage_with_steps_and_children(steps):
    stage = StageNode(
        name="mixed",
        steps=[StepNode(name="sh", data={"script": "ls"})],
        children=[StageNode(name="child")],
    )
    with pytest.raises(ValidationError, match="both"):
        encode_stage(stage, steps)


def test_pipeline_without_agent(steps):
    tree = Pipeline()
    tree.agent = None
    with pytest.raises(ValidationError, match="agent"):
        encode_pipeline(tree, steps)


def test_encode_steps_snippet(steps):
    out = encode_steps(
        [StepNode(name="echo", data={"message": literal("hi")})],
        steps,
    )
    assert out == [{"name": "echo", "arguments": cell("hi")}]


def test_output_is_independent_of_tree(steps):
    tree = Pipeline(unknown={"section": {"list": [1]}})
    out = encode_pipeline(tree, steps)
    out["pipeline"]["section"]["list"].append(2)
    assert tree.unknown == {"section": {"list": [1]}}
