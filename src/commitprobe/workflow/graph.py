"""Graph workflow definition."""

from pydantic_graph import Graph, GraphBuilder

from commitprobe.core.config import State
from commitprobe.core.log import logger


def create_workflow() -> Graph:
    """Create the verify workflow graph.

    Setup → CheckScript → CheckWorkflow → Cleanup → Summarize

    Run it with `await graph.run(state=state, inputs=Setup())`;
    the output is the exit code.
    """
    logger.debug("Building workflow graph")

    # Node return hints are resolved against this frame's locals
    from commitprobe.workflow.nodes.check_script import CheckScript
    from commitprobe.workflow.nodes.check_workflow import CheckWorkflow
    from commitprobe.workflow.nodes.cleanup import Cleanup
    from commitprobe.workflow.nodes.setup import Setup
    from commitprobe.workflow.nodes.summarize import Summarize

    g = GraphBuilder(
        name="verify",
        state_type=State,
        input_type=Setup,
        output_type=int,
    )
    g.add(
        g.edge_from(g.start_node).to(Setup),
        g.node(Setup),
        g.node(CheckScript),
        g.node(CheckWorkflow),
        g.node(Cleanup),
        g.node(Summarize),
    )
    return g.build()
