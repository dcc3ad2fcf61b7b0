"""SPDX license list 3.7 (2019-10-22): (member, id, full name) in declaration order."""

LICENSES = (
    ("BSD0", "BSD 0", "BSD Zero Clause License"),
    ("AAL", "AAL", "Attribution Assurance License"),
    ("ABSTYLES", "Abstyles", "Abstyles License"),
    ("ADOBE2006", "Adobe-2006", "Adobe Systems Incorporated Source Code License Agreement"),
    ("ADOBE_GLYPH", "Adobe-Glyph", "Adobe Glyph List License"),
    ("ADSL", "ADSL", "Amazon Digital Services License"),
    ("AFL1_1", "AFL-1.1", "Academic Free License v1.1"),
    ("AFL1_2", "AFL-1.2", "Academic Free License v1.2"),
    ("AFL2", "AFL-2.0", "Academic Free License v2.0"),
    ("AFL2_1", "AFL-2.1", "Academic Free License v2.1"),
    ("AFL3", "AFL-3.0", "Academic Free License v3.0"),
    ("AFMPARSE", "Afmparse", "Afmparse License"),
    ("AGPL1_ONLY", "AGPL-1.0-only", "Affero General Public License v1.0 only"),
    ("AGPL1_OR_LATER", "AGPL-1.0-or-later", "Affero General Public License v1.0 or later"),
    ("AGPL3_ONLY", "AGPL-3.0-only", "GNU Affero General Public License v3.0 only"),
    ("AGPL3_OR_LATER", "AGPL-3.0-or-later", "GNU Affero General Public License v3.0 or later"),
    ("ALADDIN", "Aladdin", "Aladdin Free Public License"),
    ("AMDPLPA", "AMDPLPA", "AMD's plpa_map.c License"),
    ("AML", "AML", "Apple MIT License"),
    ("AMPAS", "AMPAS", "Academy of Motion Picture Arts and Sciences BSD"),
    ("ANTLR_PD", "ANTLR-PD", "ANTLR Software Rights Notice"),
    ("APACHE1", "Apache-1.0", "Apache License 1.0"),
    ("APACHE1_1", "Apache-1.1", "Apache License 1.1"),
    ("APACHE2", "Apache-2.0", "Apache License 2.0"),
    ("APAFML", "APAFML", "Adobe Postscript AFM License"),
    ("APL1", "APL-1.0", "Adaptive Public License 1.0"),
    ("APSL1", "APSL-1.0", "Apple Public Source License 1.0"),
    ("APSL1_1", "APSL-1.1", "Apple Public Source License 1.1"),
    ("APSL1_2", "APSL-1.2", "Apple Public Source License 1.2"),
    ("APSL2", "APSL-2.0", "Apple Public Source License 2.0"),
    ("ARTISTIC1", "Artistic-1.0", "Artistic License 1.0"),
    ("ARTISTIC1_CL8", "Artistic-1.0-cl8", "Artistic License 1.0 w/clause 8"),
    ("ARTISTIC1_PERL", "Artistic-1.0-Perl", "Artistic License 1.0 (Perl)"),
    ("ARTISTIC2", "Artistic-2.0", "Artistic License 2.0"),
    ("BAHYPH", "Bahyph", "Bahyph License"),
    ("BARR", "Barr", "Barr License"),
    ("BEERWARE", "Beerware", "Beerware License"),
    ("BIT_TORRENT1", "BitTorrent-1.0", "BitTorrent Open Source License v1.0"),
    ("BIT_TORRENT1_1", "BitTorrent-1.1", "BitTorrent Open Source License v1.1"),
    ("BLESSING", "blessing", "SQLite Blessing"),
    ("BLUE_OAK1", "BlueOak-1.0.0", "Blue Oak Model License 1.0.0"),
    ("BORCEUX", "Borceux", "Borceux license"),
    ("BSD1_CLAUSE", "BSD-1-Clause", "BSD 1-Clause License"),
    ("BSD2_CLAUSE", "BSD-2-Clause", "BSD 2-Clause \"Simplified\" License"),
    ("BSD2_CLAUSE_FREE_BSD", "BSD-2-Clause-FreeBSD", "BSD 2-Clause FreeBSD License"),
    ("BSD2_CLAUSE_NET_BSD", "BSD-2-Clause-NetBSD", "BSD 2-Clause NetBSD License"),
    ("BSD2_CLAUSE_PATENT", "BSD-2-Clause-Patent", "BSD-2-Clause Plus Patent License"),
    ("BSD3_CLAUSE", "BSD-3-Clause", "BSD 3-Clause \"New\" or \"Revised\" License"),
    ("BSD3_CLAUSE_ATTRIBUTION", "BSD-3-Clause-Attribution", "BSD with attribution"),
    ("BSD3_CLAUSE_CLEAR", "BSD-3-Clause-Clear", "BSD 3-Clause Clear License"),
    ("BSD3_CLAUSE_LBNL", "BSD-3-Clause-LBNL", "Lawrence Berkeley National Labs BSD variant license"),
    ("BSD3_CLAUSE_NO_NUCLEAR_LICENSE", "BSD-3-Clause-No-Nuclear-License", "BSD 3-Clause No Nuclear License"),
    ("BSD3_CLAUSE_NO_NUCLEAR_LICENSE2014", "BSD-3-Clause-No-Nuclear-License-2014", "BSD 3-Clause No Nuclear License 2014"),
    ("BSD3_CLAUSE_NO_NUCLEAR_WARRANTY", "BSD-3-Clause-No-Nuclear-Warranty", "BSD 3-Clause No Nuclear Warranty"),
    ("BSD3_CLAUSE_OPEN_MPI", "BSD-3-Clause-Open-MPI", "BSD 3-Clause Open MPI variant"),
    ("BSD4_CLAUSE", "BSD-4-Clause", "BSD 4-Clause \"Original\" or \"Old\" License"),
    ("BSD4_CLAUSE_UC", "BSD-4-Clause-UC", "BSD-4-Clause (University of California-Specific)"),
    ("BSD_PROTECTION", "BSD-Protection", "BSD Protection License"),
    ("BSD_SOURCE_CODE", "BSD-Source-Code", "BSD Source Code Attribution"),
    ("BSL1", "BSL-1.0", "Boost Software License 1.0"),
    ("BZIP21_0_5", "bzip2-1.0.5", "bzip2 and libbzip2 License v1.0.5"),
    ("BZIP21_0_6", "bzip2-1.0.6", "bzip2 and libbzip2 License v1.0.6"),
    ("CALDERA", "Caldera", "Caldera License"),
    ("CATOSL1_1", "CATOSL-1.1", "Computer Associates Trusted Open Source License 1.1"),
    ("CC_BY1", "CC-BY-1.0", "Creative Commons Attribution 1.0 Generic"),
    ("CC_BY2", "CC-BY-2.0", "Creative Commons Attribution 2.0 Generic"),
    ("CC_BY2_5", "CC-BY-2.5", "Creative Commons Attribution 2.5 Generic"),
    ("CC_BY3", "CC-BY-3.0", "Creative Commons Attribution 3.0 Unported"),
    ("CC_BY4", "CC-BY-4.0", "Creative Commons Attribution 4.0 International"),
    ("CC_BY_NC1", "CC-BY-NC-1.0", "Creative Commons Attribution Non Commercial 1.0 Generic"),
    ("CC_BY_NC2", "CC-BY-NC-2.0", "Creative Commons Attribution Non Commercial 2.0 Generic"),
    ("CC_BY_NC2_5", "CC-BY-NC-2.5", "Creative Commons Attribution Non Commercial 2.5 Generic"),
    ("CC_BY_NC3", "CC-BY-NC-3.0", "Creative Commons Attribution Non Commercial 3.0 Unported"),
    ("CC_BY_NC4", "CC-BY-NC-4.0", "Creative Commons Attribution Non Commercial 4.0 International"),
    ("CC_BY_NC_ND1", "CC-BY-NC-ND-1.0", "Creative Commons Attribution Non Commercial No Derivatives 1.0 Generic"),
    ("CC_BY_NC_ND2", "CC-BY-NC-ND-2.0", "Creative Commons Attribution Non Commercial No Derivatives 2.0 Generic"),
    ("CC_BY_NC_ND2_5", "CC-BY-NC-ND-2.5", "Creative Commons Attribution Non Commercial No Derivatives 2.5 Generic"),
    ("CC_BY_NC_ND3", "CC-BY-NC-ND-3.0", "Creative Commons Attribution Non Commercial No Derivatives 3.0 Unported"),
    ("CC_BY_NC_ND4", "CC-BY-NC-ND-4.0", "Creative Commons Attribution Non Commercial No Derivatives 4.0 International"),
    ("CC_BY_NC_SA1", "CC-BY-NC-SA-1.0", "Creative Commons Attribution Non Commercial Share Alike 1.0 Generic"),
    ("CC_BY_NC_SA2", "CC-BY-NC-SA-2.0", "Creative Commons Attribution Non Commercial Share Alike 2.0 Generic"),
    ("CC_BY_NC_SA2_5", "CC-BY-NC-SA-2.5", "Creative Commons Attribution Non Commercial Share Alike 2.5 Generic"),
    ("CC_BY_NC_SA3", "CC-BY-NC-SA-3.0", "Creative Commons Attribution Non Commercial Share Alike 3.0 Unported"),
    ("CC_BY_NC_SA4", "CC-BY-NC-SA-4.0", "Creative Commons Attribution Non Commercial Share Alike 4.0 International"),
    ("CC_BY_ND1", "CC-BY-ND-1.0", "Creative Commons Attribution No Derivatives 1.0 Generic"),
    ("CC_BY_ND2", "CC-BY-ND-2.0", "Creative Commons Attribution No Derivatives 2.0 Generic"),
    ("CC_BY_ND2_5", "CC-BY-ND-2.5", "Creative Commons Attribution No Derivatives 2.5 Generic"),
    ("CC_BY_ND3", "CC-BY-ND-3.0", "Creative Commons Attribution No Derivatives 3.0 Unported"),
    ("CC_BY_ND4", "CC-BY-ND-4.0", "Creative Commons Attribution No Derivatives 4.0 International"),
    ("CC_BY_SA1", "CC-BY-SA-1.0", "Creative Commons Attribution Share Alike 1.0 Generic"),
    ("CC_BY_SA2", "CC-BY-SA-2.0", "Creative Commons Attribution Share Alike 2.0 Generic"),
    ("CC_BY_SA2_5", "CC-BY-SA-2.5", "Creative Commons Attribution Share Alike 2.5 Generic"),
    ("CC_BY_SA3", "CC-BY-SA-3.0", "Creative Commons Attribution Share Alike 3.0 Unported"),
    ("CC_BY_SA4", "CC-BY-SA-4.0", "Creative Commons Attribution Share Alike 4.0 International"),
    ("CC_PDDC", "CC-PDDC", "Creative Commons Public Domain Dedication and Certification"),
    ("CC01", "CC0-1.0", "Creative Commons Zero v1.0 Universal"),
    ("CDDL1", "CDDL-1.0", "Common Development and Distribution License 1.0"),
    ("CDDL1_1", "CDDL-1.1", "Common Development and Distribution License 1.1"),
    ("CDLA_PERMISSIVE1", "CDLA-Permissive-1.0", "Community Data License Agreement Permissive 1.0"),
    ("CDLA_SHARING1", "CDLA-Sharing-1.0", "Community Data License Agreement Sharing 1.0"),
    ("CECILL1", "CECILL-1.0", "CeCILL Free Software License Agreement v1.0"),
    ("CECILL1_1", "CECILL-1.1", "CeCILL Free Software License Agreement v1.1"),
    ("CECILL2", "CECILL-2.0", "CeCILL Free Software License Agreement v2.0"),
    ("CECILL2_1", "CECILL-2.1", "CeCILL Free Software License Agreement v2.1"),
    ("CECILL_B", "CECILL-B", "CeCILL-B Free Software License Agreement"),
    ("CECILL_C", "CECILL-C", "CeCILL-C Free Software License Agreement"),
    ("CERN_OHL1_1", "CERN-OHL-1.1", "CERN Open Hardware Licence v1.1"),
    ("CERN_OHL1_2", "CERN-OHL-1.2", "CERN Open Hardware Licence v1.2"),
    ("CL_ARTISTIC", "ClArtistic", "Clarified Artistic License"),
    ("CNRI_JYTHON", "CNRI-Jython", "CNRI Jython License"),
    ("CNRI_PYTHON", "CNRI-Python", "CNRI Python License"),
    ("CNRI_PYTHON_GPL_COMPATIBLE", "CNRI-Python-GPL-Compatible", "CNRI Python Open Source GPL Compatible License Agreement"),
    ("CONDOR1_1", "Condor-1.1", "Condor Public License v1.1"),
    ("COPYLEFT_NEXT0_3", "copyleft-next-0.3.0", "copyleft-next 0.3.0"),
    ("COPYLEFT_NEXT0_3_1", "copyleft-next-0.3.1", "copyleft-next 0.3.1"),
    ("CPAL1", "CPAL-1.0", "Common Public Attribution License 1.0"),
    ("CPL1", "CPL-1.0", "Common Public License 1.0"),
    ("CPOL1_02", "CPOL-1.02", "Code Project Open License 1.02"),
    ("CROSSWORD", "Crossword", "Crossword License"),
    ("CRYSTAL_STACKER", "CrystalStacker", "CrystalStacker License"),
    ("CUA_OPL1", "CUA-OPL-1.0", "CUA Office Public License v1.0"),
    ("CUBE", "Cube", "Cube License"),
    ("CURL", "curl", "curl License"),
    ("DFSL1", "D-FSL-1.0", "Deutsche Freie Software Lizenz"),
    ("DIFFMARK", "diffmark", "diffmark license"),
    ("DOC", "DOC", "DOC License"),
    ("DOTSEQN", "Dotseqn", "Dotseqn License"),
    ("DSDP", "DSDP", "DSDP License"),
    ("DVIPDFM", "dvipdfm", "dvipdfm License"),
    ("ECL1", "ECL-1.0", "Educational Community License v1.0"),
    ("ECL2", "ECL-2.0", "Educational Community License v2.0"),
    ("EFL1", "EFL-1.0", "Eiffel Forum License v1.0"),
    ("EFL2", "EFL-2.0", "Eiffel Forum License v2.0"),
    ("EGENIX", "eGenix", "eGenix.com Public License 1.1.0"),
    ("ENTESSA", "Entessa", "Entessa Public License v1.0"),
    ("EPL1", "EPL-1.0", "Eclipse Public License 1.0"),
    ("EPL2", "EPL-2.0", "Eclipse Public License 2.0"),
    ("ERL_PL1_1", "ErlPL-1.1", "Erlang Public License v1.1"),
    ("ETALAB2", "etalab-2.0", "Etalab Open License 2.0"),
    ("EUDATAGRID", "EUDatagrid", "EU DataGrid Software License"),
    ("EUPL1", "EUPL-1.0", "European Union Public License 1.0"),
    ("EUPL1_1", "EUPL-1.1", "European Union Public License 1.1"),
    ("EUPL1_2", "EUPL-1.2", "European Union Public License 1.2"),
    ("EUROSYM", "Eurosym", "Eurosym License"),
    ("FAIR", "Fair", "Fair License"),
    ("FRAMEWORX1", "Frameworx-1.0", "Frameworx Open License 1.0"),
    ("FREE_IMAGE", "FreeImage", "FreeImage Public License v1.0"),
    ("FSFAP", "FSFAP", "FSF All Permissive License"),
    ("FSFUL", "FSFUL", "FSF Unlimited License"),
    ("FSFULLR", "FSFULLR", "FSF Unlimited License (with License Retention)"),
    ("FTL", "FTL", "Freetype Project License"),
    ("GFDL1_1_ONLY", "GFDL-1.1-only", "GNU Free Documentation License v1.1 only"),
    ("GFDL1_1_OR_LATER", "GFDL-1.1-or-later", "GNU Free Documentation License v1.1 or later"),
    ("GFDL1_2_ONLY", "GFDL-1.2-only", "GNU Free Documentation License v1.2 only"),
    ("GFDL1_2_OR_LATER", "GFDL-1.2-or-later", "GNU Free Documentation License v1.2 or later"),
    ("GFDL1_3_ONLY", "GFDL-1.3-only", "GNU Free Documentation License v1.3 only"),
    ("GFDL1_3_OR_LATER", "GFDL-1.3-or-later", "GNU Free Documentation License v1.3 or later"),
    ("GIFTWARE", "Giftware", "Giftware License"),
    ("GL2_PS", "GL2PS", "GL2PS License"),
    ("GLIDE", "Glide", "3dfx Glide License"),
    ("GLULXE", "Glulxe", "Glulxe License"),
    ("GNUPLOT", "gnuplot", "gnuplot License"),
    ("GPL1_ONLY", "GPL-1.0-only", "GNU General Public License v1.0 only"),
    ("GPL1_OR_LATER", "GPL-1.0-or-later", "GNU General Public License v1.0 or later"),
    ("GPL2_ONLY", "GPL-2.0-only", "GNU General Public License v2.0 only"),
    ("GPL2_OR_LATER", "GPL-2.0-or-later", "GNU General Public License v2.0 or later"),
    ("GPL3_ONLY", "GPL-3.0-only", "GNU General Public License v3.0 only"),
    ("GPL3_OR_LATER", "GPL-3.0-or-later", "GNU General Public License v3.0 or later"),
    ("GSOAP1_3B", "gSOAP-1.3b", "gSOAP Public License v1.3b"),
    ("HASKELL_REPORT", "HaskellReport", "Haskell Language Report License"),
    ("HPND", "HPND", "Historical Permission Notice and Disclaimer"),
    ("HPND_SELL_VARIANT", "HPND-sell-variant", "Historical Permission Notice and Disclaimer - sell variant"),
    ("IBM_PIBS", "IBM-pibs", "IBM PowerPC Initialization and Boot Software"),
    ("ICU", "ICU", "ICU License"),
    ("IJG", "IJG", "Independent JPEG Group License"),
    ("IMAGE_MAGICK", "ImageMagick", "ImageMagick License"),
    ("IMATIX", "iMatix", "iMatix Standard Function Library Agreement"),
    ("IMLIB2", "Imlib2", "Imlib2 License"),
    ("INFO_ZIP", "Info-ZIP", "Info-ZIP License"),
    ("INTEL", "Intel", "Intel Open Source License"),
    ("INTEL_ACPI", "Intel-ACPI", "Intel ACPI Software License Agreement"),
    ("INTERBASE1", "Interbase-1.0", "Interbase Public License v1.0"),
    ("IPA", "IPA", "IPA Font License"),
    ("IPL1", "IPL-1.0", "IBM Public License v1.0"),
    ("ISC", "ISC", "ISC License"),
    ("JAS_PER2", "JasPer-2.0", "JasPer License"),
    ("JPNIC", "JPNIC", "Japan Network Information Center License"),
    ("JSON", "JSON", "JSON License"),
    ("LAL1_2", "LAL-1.2", "Licence Art Libre 1.2"),
    ("LAL1_3", "LAL-1.3", "Licence Art Libre 1.3"),
    ("LATEX2E", "Latex2e", "Latex2e License"),
    ("LEPTONICA", "Leptonica", "Leptonica License"),
    ("LGPL2_ONLY", "LGPL-2.0-only", "GNU Library General Public License v2 only"),
    ("LGPL2_OR_LATER", "LGPL-2.0-or-later", "GNU Library General Public License v2 or later"),
    ("LGPL2_1_ONLY", "LGPL-2.1-only", "GNU Lesser General Public License v2.1 only"),
    ("LGPL2_1_OR_LATER", "LGPL-2.1-or-later", "GNU Lesser General Public License v2.1 or later"),
    ("LGPL3_ONLY", "LGPL-3.0-only", "GNU Lesser General Public License v3.0 only"),
    ("LGPL3_OR_LATER", "LGPL-3.0-or-later", "GNU Lesser General Public License v3.0 or later"),
    ("LGPLLR", "LGPLLR", "Lesser General Public License For Linguistic Resources"),
    ("LIBPNG", "Libpng", "libpng License"),
    ("LIBPNG2", "libpng-2.0", "PNG Reference Library version 2"),
    ("LIBTIFF", "libtiff", "libtiff License"),
    ("LI_LI_QP1_1", "LiLiQ-P-1.1", "Licence Libre du Québec – Permissive version 1.1"),
    ("LI_LI_QR1_1", "LiLiQ-R-1.1", "Licence Libre du Québec – Réciprocité version 1.1"),
    ("LI_LI_QRPLUS1_1", "LiLiQ-Rplus-1.1", "Licence Libre du Québec – Réciprocité forte version 1.1"),
    ("LINUX_OPEN_IB", "Linux-OpenIB", "Linux Kernel Variant of OpenIB.org license"),
    ("LPL1", "LPL-1.0", "Lucent Public License Version 1.0"),
    ("LPL1_02", "LPL-1.02", "Lucent Public License v1.02"),
    ("LPPL1", "LPPL-1.0", "LaTeX Project Public License v1.0"),
    ("LPPL1_1", "LPPL-1.1", "LaTeX Project Public License v1.1"),
    ("LPPL1_2", "LPPL-1.2", "LaTeX Project Public License v1.2"),
    ("LPPL1_3A", "LPPL-1.3a", "LaTeX Project Public License v1.3a"),
    ("LPPL1_3C", "LPPL-1.3c", "LaTeX Project Public License v1.3c"),
    ("MAKE_INDEX", "MakeIndex", "MakeIndex License"),
    ("MIR_OS", "MirOS", "The MirOS Licence"),
    ("MIT", "MIT", "MIT License"),
    ("MIT0", "MIT-0", "MIT No Attribution"),
    ("MIT_ADVERTISING", "MIT-advertising", "Enlightenment License (e16)"),
    ("MIT_CMU", "MIT-CMU", "CMU License"),
    ("MIT_ENNA", "MIT-enna", "enna License"),
    ("MIT_FEH", "MIT-feh", "feh License"),
    ("MITNFA", "MITNFA", "MIT +no-false-attribs license"),
    ("MOTOSOTO", "Motosoto", "Motosoto License"),
    ("MPICH2", "mpich2", "mpich2 License"),
    ("MPL1", "MPL-1.0", "Mozilla Public License 1.0"),
    ("MPL1_1", "MPL-1.1", "Mozilla Public License 1.1"),
    ("MPL2", "MPL-2.0", "Mozilla Public License 2.0"),
    ("MPL2_NO_COPYLEFT_EXCEPTION", "MPL-2.0-no-copyleft-exception", "Mozilla Public License 2.0 (no copyleft exception)"),
    ("MS_PL", "MS-PL", "Microsoft Public License"),
    ("MS_RL", "MS-RL", "Microsoft Reciprocal License"),
    ("MTLL", "MTLL", "Matrix Template Library License"),
    ("MULAN_PSL1", "MulanPSL-1.0", "Mulan Permissive Software License, Version 1"),
    ("MULTICS", "Multics", "Multics License"),
    ("MUP", "Mup", "Mup License"),
    ("NASA1_3", "NASA-1.3", "NASA Open Source Agreement 1.3"),
    ("NAUMEN", "Naumen", "Naumen Public License"),
    ("NBPL1", "NBPL-1.0", "Net Boolean Public License v1"),
    ("NCSA", "NCSA", "University of Illinois/NCSA Open Source License"),
    ("NET_SNMP", "Net-SNMP", "Net-SNMP License"),
    ("NET_CDF", "NetCDF", "NetCDF license"),
    ("NEWSLETR", "Newsletr", "Newsletr License"),
    ("NGPL", "NGPL", "Nethack General Public License"),
    ("NLOD1", "NLOD-1.0", "Norwegian Licence for Open Government Data"),
    ("NLPL", "NLPL", "No Limit Public License"),
    ("NOKIA", "Nokia", "Nokia Open Source License"),
    ("NOSL", "NOSL", "Netizen Open Source License"),
    ("NOWEB", "Noweb", "Noweb License"),
    ("NPL1", "NPL-1.0", "Netscape Public License v1.0"),
    ("NPL1_1", "NPL-1.1", "Netscape Public License v1.1"),
    ("NPOSL3", "NPOSL-3.0", "Non-Profit Open Software License 3.0"),
    ("NRL", "NRL", "NRL License"),
    ("NTP", "NTP", "NTP License"),
    ("OCCT_PL", "OCCT-PL", "Open CASCADE Technology Public License"),
    ("OCLC2", "OCLC-2.0", "OCLC Research Public License 2.0"),
    ("ODB_L1", "ODbL-1.0", "ODC Open Database License v1.0"),
    ("ODC_BY1", "ODC-By-1.0", "Open Data Commons Attribution License v1.0"),
    ("OFL1", "OFL-1.0", "SIL Open Font License 1.0"),
    ("OFL1_1", "OFL-1.1", "SIL Open Font License 1.1"),
    ("OGL_CANADA2", "OGL-Canada-2.0", "Open Government Licence - Canada"),
    ("OGL_UK1", "OGL-UK-1.0", "Open Government Licence v1.0"),
    ("OGL_UK2", "OGL-UK-2.0", "Open Government Licence v2.0"),
    ("OGL_UK3", "OGL-UK-3.0", "Open Government Licence v3.0"),
    ("OGTSL", "OGTSL", "Open Group Test Suite License"),
    ("OLDAP1_1", "OLDAP-1.1", "Open LDAP Public License v1.1"),
    ("OLDAP1_2", "OLDAP-1.2", "Open LDAP Public License v1.2"),
    ("OLDAP1_3", "OLDAP-1.3", "Open LDAP Public License v1.3"),
    ("OLDAP1_4", "OLDAP-1.4", "Open LDAP Public License v1.4"),
    ("OLDAP2", "OLDAP-2.0", "Open LDAP Public License v2.0 (or possibly 2.0A and 2.0B)"),
    ("OLDAP2_0_1", "OLDAP-2.0.1", "Open LDAP Public License v2.0.1"),
    ("OLDAP2_1", "OLDAP-2.1", "Open LDAP Public License v2.1"),
    ("OLDAP2_2", "OLDAP-2.2", "Open LDAP Public License v2.2"),
    ("OLDAP2_2_1", "OLDAP-2.2.1", "Open LDAP Public License v2.2.1"),
    ("OLDAP2_2_2", "OLDAP-2.2.2", "Open LDAP Public License 2.2.2"),
    ("OLDAP2_3", "OLDAP-2.3", "Open LDAP Public License v2.3"),
    ("OLDAP2_4", "OLDAP-2.4", "Open LDAP Public License v2.4"),
    ("OLDAP2_5", "OLDAP-2.5", "Open LDAP Public License v2.5"),
    ("OLDAP2_6", "OLDAP-2.6", "Open LDAP Public License v2.6"),
    ("OLDAP2_7", "OLDAP-2.7", "Open LDAP Public License v2.7"),
    ("OLDAP2_8", "OLDAP-2.8", "Open LDAP Public License v2.8"),
    ("OML", "OML", "Open Market License"),
    ("OPEN_SSL", "OpenSSL", "OpenSSL License"),
    ("OPL1", "OPL-1.0", "Open Public License v1.0"),
    ("OSET_PL2_1", "OSET-PL-2.1", "OSET Public License version 2.1"),
    ("OSL1", "OSL-1.0", "Open Software License 1.0"),
    ("OSL1_1", "OSL-1.1", "Open Software License 1.1"),
    ("OSL2", "OSL-2.0", "Open Software License 2.0"),
    ("OSL2_1", "OSL-2.1", "Open Software License 2.1"),
    ("OSL3", "OSL-3.0", "Open Software License 3.0"),
    ("PARITY6", "Parity-6.0.0", "The Parity Public License 6.0.0"),
    ("PDDL1", "PDDL-1.0", "ODC Public Domain Dedication & License 1.0"),
    ("PHP3", "-PHP 3.0", "PHP License v3.0"),
    ("PHP3_01", "-PHP 3.01", "PHP License v3.01"),
    ("PLEXUS", "Plexus", "Plexus Classworlds License"),
    ("POSTGRE_SQL", "PostgreSQL", "PostgreSQL License"),
    ("PSFRAG", "psfrag", "psfrag License"),
    ("PSUTILS", "psutils", "psutils License"),
    ("PYTHON2", "Python-2.0", "Python License 2.0"),
    ("QHULL", "Qhull", "Qhull License"),
    ("QPL1", "QPL-1.0", "Q Public License 1.0"),
    ("RDISC", "Rdisc", "Rdisc License"),
    ("RHE_COS1_1", "RHeCos-1.1", "Red Hat eCos Public License v1.1"),
    ("RPL1_1", "RPL-1.1", "Reciprocal Public License 1.1"),
    ("RPL1_5", "RPL-1.5", "Reciprocal Public License 1.5"),
    ("RPSL1", "RPSL-1.0", "RealNetworks Public Source License v1.0"),
    ("RSA_MD", "RSA-MD", "RSA Message-Digest License"),
    ("RSCPL", "RSCPL", "Ricoh Source Code Public License"),
    ("RUBY", "Ruby", "Ruby License"),
    ("SAX_PD", "SAX-PD", "Sax Public Domain Notice"),
    ("SAXPATH", "Saxpath", "Saxpath License"),
    ("SCEA", "SCEA", "SCEA Shared Source License"),
    ("SENDMAIL", "Sendmail", "Sendmail License"),
    ("SENDMAIL8_23", "Sendmail-8.23", "Sendmail License 8.23"),
    ("SGI_B1", "SGI-B-1.0", "SGI Free Software License B v1.0"),
    ("SGI_B1_1", "SGI-B-1.1", "SGI Free Software License B v1.1"),
    ("SGI_B2", "SGI-B-2.0", "SGI Free Software License B v2.0"),
    ("SHL0_5", "SHL-0.5", "Solderpad Hardware License v0.5"),
    ("SHL0_51", "SHL-0.51", "Solderpad Hardware License, Version 0.51"),
    ("SIM_PL2", "SimPL-2.0", "Simple Public License 2.0"),
    ("SISSL", "SISSL", "Sun Industry Standards Source License v1.1"),
    ("SISSL1_2", "SISSL-1.2", "Sun Industry Standards Source License v1.2"),
    ("SLEEPYCAT", "Sleepycat", "Sleepycat License"),
    ("SMLNJ", "SMLNJ", "Standard ML of New Jersey License"),
    ("SMPPL", "SMPPL", "Secure Messaging Protocol Public License"),
    ("SNIA", "SNIA", "SNIA Public License 1.1"),
    ("SPENCER86", "Spencer-86", "Spencer License 86"),
    ("SPENCER94", "Spencer-94", "Spencer License 94"),
    ("SPENCER99", "Spencer-99", "Spencer License 99"),
    ("SPL1", "SPL-1.0", "Sun Public License v1.0"),
    ("SSH_OPEN_SSH", "SSH-OpenSSH", "SSH OpenSSH license"),
    ("SSH_SHORT", "SSH-short", "SSH short notice"),
    ("SSPL1", "SSPL-1.0", "Server Side Public License, v 1"),
    ("SUGAR_CRM1_1_3", "SugarCRM-1.1.3", "SugarCRM Public License v1.1.3"),
    ("SWL", "SWL", "Scheme Widget Library (SWL) Software License Agreement"),
    ("TAPR_OHL1", "TAPR-OHL-1.0", "TAPR Open Hardware License v1.0"),
    ("TCL", "TCL", "TCL/TK License"),
    ("TCP_WRAPPERS", "TCP-wrappers", "TCP Wrappers License"),
    ("TMATE", "TMate", "TMate Open Source License"),
    ("TORQUE1_1", "TORQUE-1.1", "TORQUE v2.5+ Software License v1.1"),
    ("TOSL", "TOSL", "Trusster Open Source License"),
    ("TU_BERLIN1", "TU-Berlin-1.0", "Technische Universitaet Berlin License 1.0"),
    ("TU_BERLIN2", "TU-Berlin-2.0", "Technische Universitaet Berlin License 2.0"),
    ("UCL1", "UCL-1.0", "Upstream Compatibility License v1.0"),
    ("UNICODE_DFS2015", "Unicode-DFS-2015", "Unicode License Agreement - Data Files and Software (2015)"),
    ("UNICODE_DFS2016", "Unicode-DFS-2016", "Unicode License Agreement - Data Files and Software (2016)"),
    ("UNICODE_TOU", "Unicode-TOU", "Unicode Terms of Use"),
    ("UNLICENSE", "Unlicense", "The Unlicense"),
    ("UPL1", "UPL-1.0", "Universal Permissive License v1.0"),
    ("VIM", "Vim", "Vim License"),
    ("VOSTROM", "VOSTROM", "VOSTROM Public License for Open Source"),
    ("VSL1", "VSL-1.0", "Vovida Software License v1.0"),
    ("W3_C", "W3C", "W3C Software Notice and License (2002-12-31)"),
    ("W3_C19980720", "W3C-19980720", "W3C Software Notice and License (1998-07-20)"),
    ("W3_C20150513", "W3C-20150513", "W3C Software Notice and Document License (2015-05-13)"),
    ("WATCOM1", "Watcom-1.0", "Sybase Open Watcom Public License 1.0"),
    ("WSUIPA", "Wsuipa", "Wsuipa License"),
    ("WTFPL", "WTFPL", "Do What The F*ck You Want To Public License"),
    ("X11", "X11", "X11 License"),
    ("XEROX", "Xerox", "Xerox License"),
    ("XFREE861_1", "XFree86-1.1", "XFree86 License 1.1"),
    ("XINETD", "xinetd", "xinetd License"),
    ("XNET", "Xnet", "X.Net License"),
    ("XPP", "xpp", "XPP License"),
    ("XSKAT", "XSkat", "XSkat License"),
    ("YPL1", "YPL-1.0", "Yahoo! Public License v1.0"),
    ("YPL1_1", "YPL-1.1", "Yahoo! Public License v1.1"),
    ("ZED", "Zed", "Zed License"),
    ("ZEND2", "Zend-2.0", "Zend License v2.0"),
    ("ZIMBRA1_3", "Zimbra-1.3", "Zimbra Public License v1.3"),
    ("ZIMBRA1_4", "Zimbra-1.4", "Zimbra Public License v1.4"),
    ("ZLIB", "Zlib", "zlib License"),
    ("ZLIB_ACKNOWLEDGEMENT", "zlib-acknowledgement", "zlib/libpng License with Acknowledgement"),
    ("ZPL1_1", "ZPL-1.1", "Zope Public License 1.1"),
    ("ZPL2", "ZPL-2.0", "Zope Public License 2.0"),
    ("ZPL2_1", "ZPL-2.1", "Zope Public License 2.1"),
)
