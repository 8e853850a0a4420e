import pytest

# Three sentences in export format 4.
# Sentence 1 refers back to sentence 0 from a terminal, sentence 2 stacks
# directives on a terminal and two of its ancestors.
SAMPLE_EXPORT = """\
%% sample corpus
#FORMAT 4
#BOT ORIGIN
0\tsample.txt
#EOT ORIGIN
#BOS 0 2 1296577340 0
Der\tder\tART\tnsm\tNK\t500
Mann\tMann\tNN\tnsm\tNK\t510
aus\taus\tAPPR\t--\tAD\t510
Berlin\tBerlin\tNE\tdsn\tNK\t500
#500\t--\tNP\t--\t--\t0
#510\t--\tPP\t--\tMNR\t500
#EOS 0
#BOS 1 2 1296577340 0
Gestern\tgestern\tADV\t--\tMO\t501
habe\thaben\tVAFIN\t1sis\tHD\t501
ich\tich\tPPER\t1nsn\tSB\t501
mit\tmit\tAPPR\t--\tMO\t502
seiner\tsein\tPPOSAT\tdsf\tNK\t502
Frau\tFrau\tNN\tdsf\tNK\t502
ihn\ter\tPPER\t3asm\tOA\t501\t%% R=coreferential.0:500
getroffen\ttreffen\tVVPP\t--\tHD\t501
.\t--\t$.\t--\t--\t0
#501\t--\tS\t--\t--\t0
#502\t--\tPP\t--\tMO\t501
#EOS 1
#BOS 2 2 1296577340 0
Sein\tsein\tPPOSAT\tnsm\tNK\t503\t%% R=coreferential.1:7
Freund\tFreund\tNN\tnsm\tNK\t503
lachte\tlachen\tVVFIN\t3sis\tHD\t504
.\t--\t$.\t--\t--\t0
#503\t--\tNP\t--\tSB\t504\t%% R=coreferential.0:510
#504\t--\tS\t--\t--\t0\t%% R=coreferential.0:500
#EOS 2
"""

PLAIN_EXPORT = """\
#FORMAT 4
#BOS 1 1 1296577340 0
Es\tes\tPPER\t3nsn\tSB\t500
regnet\tregnen\tVVFIN\t3sis\tHD\t500
.\t--\t$.\t--\t--\t0
#500\t--\tS\t--\t--\t0
#EOS 1
#BOS 2 1 1296577340 0
Heute\theute\tADV\t--\tMO\t0\t%% just a note
#EOS 2
"""


@pytest.fixture
def sample_export() -> str:
    return SAMPLE_EXPORT


@pytest.fixture
def plain_export() -> str:
    return PLAIN_EXPORT


@pytest.fixture
def sample_path(tmp_path):
    path = tmp_path / "sample.export"
    path.write_text(SAMPLE_EXPORT, encoding="utf-8")
    return path
